"""
Submission Model
"""

from portal.extensions import db

STATUS_NEW = 'NEW'
STATUS_IN_PROGRESS = 'IN_PROGRESS'
STATUS_COMPLETED = 'COMPLETED'
STATUS_REJECTED = 'REJECTED'

SUBMISSION_STATUSES = (STATUS_NEW, STATUS_IN_PROGRESS, STATUS_COMPLETED, STATUS_REJECTED)

# Attributes returned by the admin listing
LISTING_FIELDS = ('id', 'tracking_code', 'nama', 'jenis_layanan', 'status', 'created_at', 'updated_at')


class Submission(db.Model):
    """Citizen service submission, written by the public submission flow"""
    __tablename__ = 'submissions'

    id = db.Column(db.Integer, primary_key=True)
    tracking_code = db.Column(db.String(64), unique=True, nullable=False, index=True)
    nama = db.Column(db.String(255), nullable=False)
    jenis_layanan = db.Column(db.String(255), nullable=False)
    status = db.Column(db.Enum(*SUBMISSION_STATUSES, name='submission_status'),
                       nullable=False, default=STATUS_NEW)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp(), index=True)
    updated_at = db.Column(db.DateTime, default=db.func.current_timestamp(),
                           onupdate=db.func.current_timestamp())

    def __repr__(self):
        return f'<Submission {self.tracking_code} {self.status}>'
