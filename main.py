import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lawfirm.config import CORS_ORIGINS, LOG_LEVEL
from lawfirm.database import engine, Base
from lawfirm.errors import LawFirmError
from lawfirm.clients.routes import router as clients_router
from lawfirm.lawyers.routes import router as lawyers_router
from lawfirm.cases.routes import router as cases_router
from lawfirm.tasks.routes import router as tasks_router
from lawfirm.appointments.routes import router as appointments_router
from lawfirm.documents.routes import router as documents_router
from lawfirm.invoices.routes import router as invoices_router
from lawfirm.models import utcnow

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Law Firm Practice Backend",
    description="Clients, lawyers, cases, tasks, appointments, documents and invoices",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LawFirmError)
async def lawfirm_error_handler(request: Request, exc: LawFirmError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Include routers
app.include_router(clients_router)
app.include_router(lawyers_router)
app.include_router(cases_router)
app.include_router(tasks_router)
app.include_router(appointments_router)
app.include_router(documents_router)
app.include_router(invoices_router)

@app.get("/")
def root():
    return {
        "message": "Law Firm Practice Backend API",
        "version": "1.0.0",
        "status": "running"
    }

@app.get("/health")
def health_check():
    return {"status": "healthy", "timestamp": utcnow().isoformat()}
