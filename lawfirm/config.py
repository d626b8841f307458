from decouple import config, Csv

DATABASE_URL = config("DATABASE_URL", default="sqlite:///./lawfirm.db")
SQL_ECHO = config("SQL_ECHO", default=False, cast=bool)
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
CORS_ORIGINS = config("CORS_ORIGINS", default="http://localhost:8080", cast=Csv())
