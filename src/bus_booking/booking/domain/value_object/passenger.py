from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """乗客情報（座席ごとに1名）"""

    name: str
    seat_number: str
    age: int | None = None
    gender: str = ""

    def __post_init__(self) -> None:
        if self.age is not None and self.age < 0:
            raise ValueError(f"Passenger age cannot be negative: {self.age}")
