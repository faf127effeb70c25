"""
Auth schemas: admin login request and token response.
"""
from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    message: str = "Login successful"
    access_token: str
    token_type: str = "bearer"
