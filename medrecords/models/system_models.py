# /medrecords/models/system_models.py
from datetime import datetime
from medrecords.extensions import db


class AuditLog(db.Model):
    """Audit trail of guarded actions and sign-in attempts"""
    __tablename__ = 'audit_logs'

    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    actor_role = db.Column(db.String(20))
    actor_id = db.Column(db.String(50))
    action = db.Column(db.String(100), nullable=False)
    resource = db.Column(db.String(100))
    resource_id = db.Column(db.String(100))
    ip_address = db.Column(db.String(45))
    user_agent = db.Column(db.String(255))
    success = db.Column(db.Boolean, default=True)
    details = db.Column(db.Text)
