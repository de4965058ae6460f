from .arrival_time import compute_arrival_time as compute_arrival_time
from .customer_trips import CustomerTrip as CustomerTrip
from .customer_trips import customer_trips as customer_trips
from .dashboard import DashboardStats as DashboardStats
from .dashboard import dashboard_stats as dashboard_stats
from .fare import ticket_fare as ticket_fare
from .fare import total_fare as total_fare
from .insight import InsightGenerator as InsightGenerator
from .insight import build_insight_prompt as build_insight_prompt
from .route_performance import RoutePerformance as RoutePerformance
from .route_performance import route_performance as route_performance
from .route_performance import top_routes as top_routes
from .seat_availability import booked_seats as booked_seats
from .seat_availability import bus_capacity as bus_capacity
from .seat_availability import seat_labels as seat_labels
from .seat_availability import seats_available as seats_available
from .trip_search import TripOption as TripOption
from .trip_search import list_cities as list_cities
from .trip_search import search_trips as search_trips
from .trip_summary import TripSummary as TripSummary
from .trip_summary import trip_summaries as trip_summaries
