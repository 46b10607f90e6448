from mamaalert.extensions import db
from datetime import datetime

class SymptomLog(db.Model):
    __tablename__ = "symptom_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    symptom_type = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)
    severity = db.Column(db.String(20), nullable=False, default="mild")
    is_emergency = db.Column(db.Boolean, nullable=False, default=False)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "symptom": self.symptom_type,
            "description": self.description,
            "severity": self.severity,
            "is_emergency": bool(self.is_emergency),
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
