import pytest

from portal.admin.services import status_for_search, resolve_sort


@pytest.mark.parametrize('text, expected', [
    ('baru', 'NEW'),
    ('Pengajuan Baru', 'NEW'),
    ('  BARU  ', 'NEW'),
    ('diproses', 'IN_PROGRESS'),
    ('proses', 'IN_PROGRESS'),
    ('in_progress', 'IN_PROGRESS'),
    ('selesai', 'COMPLETED'),
    ('Completed', 'COMPLETED'),
    ('ditolak', 'REJECTED'),
    ('rejected', 'REJECTED'),
])
def test_status_synonyms(text, expected):
    assert status_for_search(text) == expected


@pytest.mark.parametrize('text', ['', None, '   ', 'KTP', 'Budi'])
def test_no_status_for_plain_text(text):
    assert status_for_search(text) is None


@pytest.mark.parametrize('sort_by, sort_dir, expected', [
    ('nama', 'ASC', ('nama', True)),
    ('name', 'asc', ('name', True)),
    (' status ', ' Asc ', ('status', True)),
    ('tracking_code', 'DESC', ('tracking_code', False)),
    ('jenis_layanan', None, ('jenis_layanan', False)),
    ('service-type', 'ASC', ('service-type', True)),
    ('service_type', 'desc', ('service_type', False)),
    ('password', 'ASC', ('created_at', True)),
    (None, None, ('created_at', False)),
    ('created_at', 'up', ('created_at', False)),
])
def test_resolve_sort(sort_by, sort_dir, expected):
    assert resolve_sort(sort_by, sort_dir) == expected
