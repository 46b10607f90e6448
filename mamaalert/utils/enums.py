from enum import Enum

class UserMode(str, Enum):
    ONBOARDING = "onboarding"
    PREGNANCY = "pregnancy"
    POSTPARTUM = "postpartum"

class BadgeTier(str, Enum):
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"

class RoadmapCategory(str, Enum):
    CONTACTS = "contacts"
    HOSPITAL = "hospital"
    TRANSPORT = "transport"
    MEDICAL = "medical"

class MessageType(str, Enum):
    EMERGENCY = "emergency"
    HEALTH_TIP = "health_tip"
    APPOINTMENT = "appointment"
    GENERAL = "general"
    LABOR_EMERGENCY = "labor_emergency"

class SymptomSeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

class LaborSignSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class AlertPolicy(str, Enum):
    ALWAYS = "always"
    ONCE_PER_DAY = "once_per_day"
    NEVER = "never"
