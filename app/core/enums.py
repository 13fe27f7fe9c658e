from enum import Enum


class FeeApplicable(str, Enum):
    ALL_STUDENTS = "all_students"
    NEW_STUDENTS = "new_students"
    OLD_STUDENTS = "old_students"


class SmsRecipient(str, Enum):
    TO_INSTITUTE = "to_institute"
    TO_GUARDIAN = "to_guardian"
    TO_BOTH = "to_both"


class SmsType(str, Enum):
    ENTRY = "entry"
    EXIT = "exit"
    ENTRY_EXIT = "entry_exit"
    ABSENT = "absent"


class AdmissionTokenStatus(str, Enum):
    ACTIVE = "active"
    USED = "used"


class AdmitCardStatus(str, Enum):
    GENERATED = "generated"
    PRINTED = "printed"


class PaymentMethod(str, Enum):
    ONLINE = "online"
    MANUAL = "manual"


class SmsPurchaseStatus(str, Enum):
    PENDING = "pending"
    WAITING_APPROVAL = "waiting_approval"
    APPROVED = "approved"


class SmsLogStatus(str, Enum):
    QUEUED = "queued"
    SENT = "sent"
    FAILED = "failed"
