from pydantic import BaseModel, Field


class AddRouteRequest(BaseModel):
    """路線追加リクエストスキーマ"""

    source: str = Field(..., min_length=1, examples=["Chennai"])
    destination: str = Field(..., min_length=1, examples=["Madurai"])
    distance: int | None = Field(default=None, ge=0, description="距離（km）")
    duration: str = Field(
        ...,
        pattern=r"^\d+h( \d+m)?$",
        description="所要時間",
        examples=["8h", "8h 30m"],
    )
    base_fare: int = Field(..., ge=0, description="基本運賃", examples=[800])
