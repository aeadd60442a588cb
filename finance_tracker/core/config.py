import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./finance_tracker.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "PHP")

# "net_minus_payouts" (default) or "fixed_rate"
SAVINGS_MODE = os.getenv("SAVINGS_MODE", "net_minus_payouts")
SAVINGS_RATE = float(os.getenv("SAVINGS_RATE", "0.4"))
