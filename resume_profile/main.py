from fastapi import FastAPI
from resume_profile.api.routes.parse import router as parse_router

app = FastAPI(
    title="Resume Profile (Resume Extraction Service)",
    description="Deterministic, rule-based extraction of contact details, skills, experience, education and projects from resume text",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-profile", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
