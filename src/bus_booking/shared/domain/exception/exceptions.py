class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class SeatUnavailableException(BusinessRuleViolationException):
    """指定座席が有効な予約で既に押さえられている場合"""

    def __init__(self, schedule_id: str, seats: list[str]) -> None:
        self.schedule_id = schedule_id
        self.seats = seats
        super().__init__(
            f"Seats already booked on schedule {schedule_id}: {', '.join(seats)}"
        )


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（同じIDのレコードが既に存在する場合）"""

    pass
