"""
API Request/Response Schemas using Pydantic

Defines data models for the price math API endpoints.
Q64.64 sqrt prices are 128-bit integers; responses carry them as decimal
strings, requests accept either strings or integers.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from whirlpool_price.constants import (
    U8_MAX,
    U16_MAX,
    U128_MAX,
    MIN_TICK_INDEX,
    MAX_TICK_INDEX,
)


class TokenDecimals(BaseModel):
    """Decimal places of the two pool tokens"""
    decimals_a: int = Field(..., description="Decimals of token A (base)", ge=0, le=U8_MAX)
    decimals_b: int = Field(..., description="Decimals of token B (quote)", ge=0, le=U8_MAX)


class PriceRequest(TokenDecimals):
    """Request payload carrying a decimal price"""
    price: float = Field(..., description="Decimal price (token B per token A)", gt=0)

    class Config:
        json_schema_extra = {
            "example": {
                "price": 140.661,
                "decimals_a": 9,
                "decimals_b": 6
            }
        }


class SqrtPriceRequest(TokenDecimals):
    """Request payload carrying a Q64.64 sqrt price"""
    sqrt_price: int = Field(..., description="Sqrt price in Q64.64", ge=0, le=U128_MAX)

    class Config:
        json_schema_extra = {
            "example": {
                "sqrt_price": "6918418495991757039",
                "decimals_a": 9,
                "decimals_b": 6
            }
        }


class TickIndexRequest(TokenDecimals):
    """Request payload carrying a tick index"""
    tick_index: int = Field(..., description="Tick index", ge=MIN_TICK_INDEX, le=MAX_TICK_INDEX)

    class Config:
        json_schema_extra = {
            "example": {
                "tick_index": -92111,
                "decimals_a": 8,
                "decimals_b": 6
            }
        }


class SqrtPriceResponse(BaseModel):
    """Response payload with a Q64.64 sqrt price"""
    sqrt_price: str = Field(..., description="Sqrt price in Q64.64 (decimal string)")


class PriceResponse(BaseModel):
    """Response payload with a decimal price"""
    price: float = Field(..., description="Decimal price (token B per token A)")


class TickIndexResponse(BaseModel):
    """Response payload with a tick index"""
    tick_index: int = Field(..., description="Tick index")


class SlippageBoundsRequest(BaseModel):
    """Request payload for POST /api/v1/slippage/bounds endpoint"""
    sqrt_price: int = Field(..., description="Current sqrt price in Q64.64", ge=0, le=U128_MAX)
    slippage_tolerance_bps: Optional[int] = Field(
        None,
        description="Slippage tolerance in basis points (values above 10000 are clamped)",
        ge=0,
        le=U16_MAX
    )

    class Config:
        json_schema_extra = {
            "example": {
                "sqrt_price": "18446744073709551616000",
                "slippage_tolerance_bps": 100
            }
        }


class SlippageBoundsResponse(BaseModel):
    """Response payload for POST /api/v1/slippage/bounds endpoint"""
    min_sqrt_price: str = Field(..., description="Lower sqrt price bound in Q64.64 (decimal string)")
    max_sqrt_price: str = Field(..., description="Upper sqrt price bound in Q64.64 (decimal string)")
    slippage_tolerance_bps: int = Field(..., description="Slippage tolerance that was applied (basis points)")

    class Config:
        json_schema_extra = {
            "example": {
                "min_sqrt_price": "18354141418459529666887",
                "max_sqrt_price": "18538793326637362278563",
                "slippage_tolerance_bps": 100
            }
        }


class HealthCheckResponse(BaseModel):
    """Response payload for GET /api/v1/health endpoint"""
    status: str = Field(..., description="Health status (healthy or unhealthy)")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Health check timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
