from mamaalert.extensions import db
from datetime import datetime

class EmergencyPlanning(db.Model):
    __tablename__ = "emergency_planning"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    weekly_reminders = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class EmergencyChecklistItem(db.Model):
    """Checked state of one roadmap item for one user."""
    __tablename__ = "emergency_checklist_items"
    __table_args__ = (
        db.UniqueConstraint("user_id", "item_id", name="uq_checklist_user_item"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    item_id = db.Column(db.String(20), nullable=False)
    is_checked = db.Column(db.Boolean, nullable=False, default=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
