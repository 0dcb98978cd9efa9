from pydantic import BaseModel, Field, field_validator


class UserClaim(BaseModel):
    """Identity carried inside a signed access token"""
    id: str = Field(..., min_length=1)

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if not v.strip():
            raise ValueError('User id cannot be empty')
        return v
