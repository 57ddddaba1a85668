import os

from dotenv import load_dotenv

load_dotenv()

MODEL_NAME = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))
TOP_P = float(os.getenv("GEMINI_TOP_P", "0.9"))

API_PREFIX = "/api"
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

RECOMMENDATION_COUNT = int(os.getenv("RECOMMENDATION_COUNT", "20"))
PLACEHOLDER_IMAGE_URL = os.getenv(
    "PLACEHOLDER_IMAGE_URL",
    "https://images.pexels.com/photos/1008155/pexels-photo-1008155.jpeg?auto=compress&w=600",
)
