from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """サインアップリクエストスキーマ"""

    name: str = Field(..., min_length=1, examples=["Arun Kumar"])
    phone: str = Field(
        ...,
        pattern=r"^\d{10}$",
        description="電話番号（10桁）",
        examples=["9840012345"],
    )
