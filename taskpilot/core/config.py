from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://taskpilot:taskpilot@db:5432/taskpilot")
    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "15"))  #expire au bout de 15 minutes
    JWT_REFRESH_EXPIRE_MIN = int(getenv("JWT_REFRESH_EXPIRE_MIN", "43200"))  #expire au bout d'1 mois
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    RECENT_TASKS_LIMIT = int(getenv("RECENT_TASKS_LIMIT", "5"))  # taille du dashboard

settings = Settings()
