# tableview/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tableview.config import get_settings
from tableview.logging_config import setup_logging
from tableview.routes import router as api_router

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

app = FastAPI(title="Table View Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Welcome to the Table View Service"}
