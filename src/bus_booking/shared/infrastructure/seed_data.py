"""初回起動時、または保存データが壊れていた場合に使う初期データ

キーはコレクション名。レコードの形式は保存時と同じ camelCase。
"""

SEED_DATA: dict[str, list[dict]] = {
    "routes": [
        {
            "routeId": "R1001",
            "source": "Chennai",
            "destination": "Madurai",
            "distance": 460,
            "duration": "8h",
            "baseFare": 800,
        },
        {
            "routeId": "R1002",
            "source": "Chennai",
            "destination": "Bangalore",
            "distance": 350,
            "duration": "6h 30m",
            "baseFare": 650,
        },
        {
            "routeId": "R1003",
            "source": "Bangalore",
            "destination": "Hyderabad",
            "distance": 570,
            "duration": "9h 15m",
            "baseFare": 1100,
        },
        {
            "routeId": "R1004",
            "source": "Coimbatore",
            "destination": "Chennai",
            "distance": 505,
            "duration": "8h 45m",
            "baseFare": 900,
        },
    ],
    "buses": [
        {
            "busId": "B2001",
            "name": "Parveen Travels",
            "seatType": "AC Seater",
            "totalSeats": 24,
            "amenities": ["AC", "Water Bottle", "Charging Point"],
        },
        {
            "busId": "B2002",
            "name": "KPN Travels",
            "seatType": "AC Seater",
            "totalSeats": 24,
            "amenities": ["AC", "Blanket", "WiFi"],
        },
        {
            "busId": "B2003",
            "name": "SRS Travels",
            "seatType": "AC Seater",
            "totalSeats": 24,
            "amenities": ["AC", "TV"],
        },
    ],
    "schedules": [
        {
            "scheduleId": "SCD3001",
            "routeId": "R1001",
            "busId": "B2001",
            "departureDate": "2025-01-10",
            "departureTime": "21:30",
            "arrivalTime": "05:30",
            "fareMultiplier": 1.25,
            "status": "Active",
        },
        {
            "scheduleId": "SCD3002",
            "routeId": "R1002",
            "busId": "B2002",
            "departureDate": "2025-01-10",
            "departureTime": "07:00",
            "arrivalTime": "13:30",
            "fareMultiplier": 1.0,
            "status": "Active",
        },
        {
            "scheduleId": "SCD3003",
            "routeId": "R1003",
            "busId": "B2003",
            "departureDate": "2025-01-11",
            "departureTime": "22:00",
            "arrivalTime": "07:15",
            "fareMultiplier": 1.1,
            "status": "Active",
        },
    ],
    "bookings": [
        {
            "bookingId": "BK4001",
            "scheduleId": "SCD3001",
            "customerId": "CUST5001",
            "customerName": "Arun Kumar",
            "travelOrigin": "Chennai",
            "travelDestination": "Madurai",
            "seatsBooked": ["1A", "1B"],
            "totalFare": 2000,
            "passengerDetails": [
                {"name": "Arun Kumar", "age": 34, "gender": "Male", "seatNumber": "1A"},
                {"name": "Divya Arun", "age": 31, "gender": "Female", "seatNumber": "1B"},
            ],
            "status": "Confirmed",
            "paymentStatus": "Paid",
            "paymentId": "PAY_4F1C2A9B7E30",
            "bookedAt": "2025-01-02T10:15:00+00:00",
        },
    ],
    "customers": [
        {
            "customerId": "CUST5001",
            "name": "Arun Kumar",
            "phone": "9840012345",
            "lifetimeBookings": 0,
            "loyaltyDiscount": 0.0,
        },
        {
            "customerId": "CUST5002",
            "name": "Meena Raj",
            "phone": "9884054321",
            "lifetimeBookings": 0,
            "loyaltyDiscount": 0.0,
        },
    ],
}
