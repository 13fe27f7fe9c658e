import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.admission_tokens.router import router as admission_tokens_router
from app.api.admit_cards.router import router as admit_cards_router
from app.api.attendance_shifts.router import router as attendance_shifts_router
from app.api.bank_accounts.router import router as bank_accounts_router
from app.api.batches.router import router as batches_router
from app.api.classes.router import router as classes_router
from app.api.discount_types.router import router as discount_types_router
from app.api.discounts.router import router as discounts_router
from app.api.exam_categories.router import router as exam_categories_router
from app.api.expense_categories.router import router as expense_categories_router
from app.api.expense_heads.router import router as expense_heads_router
from app.api.expenses.router import router as expenses_router
from app.api.fee_types.router import router as fee_types_router
from app.api.fine_types.router import router as fine_types_router
from app.api.holiday_types.router import router as holiday_types_router
from app.api.holidays.router import router as holidays_router
from app.api.income_sources.router import router as income_sources_router
from app.api.incomes.router import router as incomes_router
from app.api.payment_types.router import router as payment_types_router
from app.api.results.router import router as results_router
from app.api.sections.router import router as sections_router
from app.api.sessions.router import router as sessions_router
from app.api.sms_balance.router import router as sms_balance_router
from app.core.app_logger import setup_logging
from app.core.exceptions import ServiceError, StoreError
from app.core.schemas import fail
from app.db.session import create_all

logger = logging.getLogger(__name__)

ROUTERS = (
    sessions_router,
    classes_router,
    batches_router,
    sections_router,
    exam_categories_router,
    bank_accounts_router,
    income_sources_router,
    expense_categories_router,
    expense_heads_router,
    payment_types_router,
    incomes_router,
    expenses_router,
    fee_types_router,
    fine_types_router,
    discount_types_router,
    discounts_router,
    holidays_router,
    holiday_types_router,
    attendance_shifts_router,
    results_router,
    admission_tokens_router,
    admit_cards_router,
    sms_balance_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_all()
    logger.info("Database tables ready")
    yield


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        error = exc.error if isinstance(exc, StoreError) else None
        return fail(exc.message, exc.status_code, error)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return fail(_validation_message(exc), 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        response = fail(str(exc.detail), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        return fail("Database operation failed", 500, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return fail("Internal server error", 500, str(exc))


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="School Management Backend", lifespan=lifespan)

    # CORS: allow frontend to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in ROUTERS:
        app.include_router(router)

    register_exception_handlers(app)

    @app.get("/")
    async def root():
        return {"success": True, "message": "School management API is running"}

    return app


app = create_app()
