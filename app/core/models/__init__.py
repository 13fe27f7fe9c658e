from app.core.models.academic_session import AcademicSession
from app.core.models.admission_token import AdmissionToken
from app.core.models.admit_card import AdmitCard
from app.core.models.attendance_shift import AttendanceShift
from app.core.models.bank_account import BankAccount
from app.core.models.batch import Batch
from app.core.models.class_model import SchoolClass
from app.core.models.discount import Discount
from app.core.models.discount_type import DiscountType
from app.core.models.exam_category import ExamCategory
from app.core.models.exam_result import ExamResult
from app.core.models.expense import Expense
from app.core.models.expense_category import ExpenseCategory
from app.core.models.expense_head import ExpenseHead
from app.core.models.fee_type import FeeType
from app.core.models.fine_type import FineType
from app.core.models.holiday import Holiday
from app.core.models.holiday_type import HolidayType
from app.core.models.income import Income
from app.core.models.income_source import IncomeSource
from app.core.models.payment_type import PaymentType
from app.core.models.section_model import Section
from app.core.models.sms_balance import SmsBalance, SmsPurchase

__all__ = [
    "AcademicSession",
    "AdmissionToken",
    "AdmitCard",
    "AttendanceShift",
    "BankAccount",
    "Batch",
    "SchoolClass",
    "Discount",
    "DiscountType",
    "ExamCategory",
    "ExamResult",
    "Expense",
    "ExpenseCategory",
    "ExpenseHead",
    "FeeType",
    "FineType",
    "Holiday",
    "HolidayType",
    "Income",
    "IncomeSource",
    "PaymentType",
    "Section",
    "SmsBalance",
    "SmsPurchase",
]
