# intake_wizard/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intake_wizard.api.routes import router as api_router
from intake_wizard.config import get_settings
from intake_wizard.logger import logger


settings = get_settings()

app = FastAPI(title=settings.app_title, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.on_event("startup")
def on_startup() -> None:
    logger.info("%s starting, analysis delay %.1fs", settings.app_title, settings.submit_delay)


@app.get("/")
def root():
    return {"message": f"{settings.app_title} is running"}


app.include_router(api_router, prefix="/api")
