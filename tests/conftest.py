from datetime import datetime

import pytest

from portal import create_app
from portal.config import TestConfig
from portal.database import ensure_database
from portal.extensions import db
from portal.models import Submission
from portal.services import ensure_default_admins


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def seeded_admins(app):
    return ensure_default_admins()


@pytest.fixture()
def submissions(app):
    ensure_database()
    rows = [
        ('SUB-001', 'Budi Santoso', 'KTP', 'NEW'),
        ('SUB-002', 'Siti Aminah', 'Akta Kelahiran', 'IN_PROGRESS'),
        ('SUB-003', 'Andi Selesai', 'Kartu Keluarga', 'REJECTED'),
        ('SUB-004', 'Dewi Lestari', 'Surat Pindah', 'COMPLETED'),
        ('SUB-005', 'Rina Baru', 'KTP', 'COMPLETED'),
        ('SUB-006', 'Agus', 'Izin Usaha', 'NEW'),
    ]
    created = []
    for day, (code, nama, layanan, status) in enumerate(rows, start=1):
        ts = datetime(2024, 1, day, 9, 0, 0)
        created.append(Submission(tracking_code=code, nama=nama, jenis_layanan=layanan,
                                  status=status, created_at=ts, updated_at=ts))
    db.session.add_all(created)
    db.session.commit()
    return created
