"""
Mitra POS Backend — Login & QR Code Schemas
=============================================
"""

from pydantic import BaseModel, Field

from mitrapos.schemas.partner import UserResponse


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, examples=["johndoe"])
    password: str = Field(min_length=1, examples=["password123"])


class LoginResult(BaseModel):
    token: str = Field(description="Signed JWT (HS256) valid for JWT_EXPIRES_MINUTES")
    user: UserResponse


class QrCodeRequest(BaseModel):
    qrcode: str = Field(min_length=1, description="Text to encode", examples=["Hello, QR Code!"])


class QrCodeResult(BaseModel):
    base64: str = Field(description="PNG data URL", examples=["data:image/png;base64,iVBORw0..."])
