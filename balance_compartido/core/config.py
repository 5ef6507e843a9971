# balance_compartido/core/config.py

import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./balance_compartido.db")
DB_ECHO = _flag("DB_ECHO", "false")  # True imprime las queries

SECRET_KEY = os.getenv("SECRET_KEY", "cambia-esta-clave-en-produccion")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Sin hogar autenticado se trabaja contra el almacén en memoria
DEMO_MODE = _flag("DEMO_MODE", "true")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
