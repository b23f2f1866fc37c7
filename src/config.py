from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./metro.db"
    
    # Application
    PROJECT_NAME: str = "Hyderabad Metro Route Planner"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Route finding
    DEFAULT_ALGORITHM: str = "bfs"
    
    # Fare rules (currency units)
    BASE_FARE: int = 10
    FREE_STATIONS: int = 2  # Stations covered by the base fare
    PER_STATION_FARE: int = 5
    INTERCHANGE_PENALTY: int = 2
    
    # Travel time / distance estimates
    MINUTES_PER_HOP: float = 2.5
    MINUTES_PER_INTERCHANGE: float = 5.0
    KM_PER_HOP: float = 1.5
    
    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
