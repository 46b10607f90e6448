from .user import User
from .pregnancy import PregnancyData
from .emergency import EmergencyContact, EmergencyAlert
from .planning import EmergencyPlanning, EmergencyChecklistItem
from .symptom import SymptomLog
from .appointment import Appointment
