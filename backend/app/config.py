"""
Configuration settings for the price math API

Loads environment variables and provides application configuration.
Protocol constants (BPS_DENOMINATOR, MIN/MAX_SQRT_PRICE) are not configurable;
they live in whirlpool_price.constants.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings"""

    # API Configuration
    API_VERSION: str = "0.1.0"
    API_TITLE: str = "Whirlpool Price Math API"
    API_DESCRIPTION: str = "Price, sqrt-price (Q64.64) and tick index conversions with slippage bounds"

    # CORS Configuration
    CORS_ORIGINS: List[str] = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000"
    ).split(",")

    # Server Configuration
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8000))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Slippage tolerance used when a request omits it (basis points)
    DEFAULT_SLIPPAGE_BPS: int = int(os.getenv("DEFAULT_SLIPPAGE_BPS", 100))


# Create global settings instance
settings = Settings()
