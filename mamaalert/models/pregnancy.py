from mamaalert.extensions import db
from datetime import datetime

class PregnancyData(db.Model):
    """One row per user. A non-null delivery_date puts the user in postpartum mode."""
    __tablename__ = "pregnancy_data"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False, index=True)
    last_menstrual_period = db.Column(db.Date, nullable=True)
    due_date = db.Column(db.Date, nullable=True)
    weeks_pregnant = db.Column(db.Integer, nullable=True)
    delivery_date = db.Column(db.Date, nullable=True)
    is_high_risk = db.Column(db.Boolean, nullable=False, default=False)

    medical_conditions = db.Column(db.Text, nullable=True)
    allergies = db.Column(db.Text, nullable=True)
    current_medications = db.Column(db.Text, nullable=True)
    previous_pregnancies = db.Column(db.Text, nullable=True)
    doctor_name = db.Column(db.String(120), nullable=True)
    hospital_name = db.Column(db.String(200), nullable=True)
    emergency_notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", backref=db.backref("pregnancy_data", uselist=False))

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "last_menstrual_period": self.last_menstrual_period.isoformat() if self.last_menstrual_period else None,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "weeks_pregnant": self.weeks_pregnant,
            "delivery_date": self.delivery_date.isoformat() if self.delivery_date else None,
            "is_high_risk": bool(self.is_high_risk),
            "medical_conditions": self.medical_conditions,
            "allergies": self.allergies,
            "current_medications": self.current_medications,
            "previous_pregnancies": self.previous_pregnancies,
            "doctor_name": self.doctor_name,
            "hospital_name": self.hospital_name,
            "emergency_notes": self.emergency_notes,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
