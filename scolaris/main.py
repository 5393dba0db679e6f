from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scolaris.api.v1.absences.router import router as absences_router
from scolaris.api.v1.dashboard.router import router as dashboard_router
from scolaris.api.v1.fees.router import router as fees_router
from scolaris.api.v1.grades.router import router as grades_router
from scolaris.api.v1.ownership.router import router as ownership_router
from scolaris.api.v1.principals.router import router as principals_router
from scolaris.api.v1.reports.router import router as reports_router
from scolaris.api.v1.staff.router import router as staff_router
from scolaris.api.v1.students.router import router as students_router
from scolaris.api.v1.subjects.router import router as subjects_router
from scolaris.core.log_config import configure_logging


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Scolaris")

    # CORS: the presentation layer is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(principals_router)
    app.include_router(ownership_router)
    app.include_router(students_router)
    app.include_router(staff_router)
    app.include_router(subjects_router)
    app.include_router(absences_router)
    app.include_router(fees_router)
    app.include_router(grades_router)
    app.include_router(reports_router)
    app.include_router(dashboard_router)

    return app


app = create_app()
