"""Unit tests for testimonials, inquiries and backup export.

Tests:
- TestimonialService: color default, required fields, NotFound, silent delete
- TestimonialRepository: soft-delete filter on reads
- InquiryService: photo counting, unconditional insert
- BackupService: export shape, non-featured listings included
"""
import io
import os
import sys
from datetime import datetime

import pytest
from unittest.mock import MagicMock
from werkzeug.datastructures import FileStorage

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from showroom.core.errors import NotFound, ValidationError
from showroom.testimonials.repositories import TestimonialRepository
from showroom.testimonials.services import TestimonialService, DEFAULT_COLOR
from showroom.inquiries.services import InquiryService
from showroom.backup.services import BackupService, FORMAT_VERSION


class TestTestimonialService:

    def test_color_defaults_when_omitted(self):
        repo = MagicMock()
        repo.create.return_value = {'id': 1, 'name': 'Jane', 'color': DEFAULT_COLOR}

        TestimonialService(repo).create({'name': 'Jane', 'text': 'Great bike!'})

        assert repo.create.call_args[0][0]['color'] == DEFAULT_COLOR

    def test_explicit_color_is_kept(self):
        repo = MagicMock()
        repo.create.return_value = {'id': 1, 'name': 'Jane'}

        TestimonialService(repo).create({'name': 'Jane', 'text': 'Great bike!', 'color': 'blue'})

        assert repo.create.call_args[0][0]['color'] == 'blue'

    @pytest.mark.parametrize('data', [{'name': 'Jane'}, {'text': 'Nice'}, {'name': ' ', 'text': ' '}])
    def test_name_and_text_required(self, data):
        repo = MagicMock()
        with pytest.raises(ValidationError):
            TestimonialService(repo).create(data)
        repo.create.assert_not_called()

    def test_update_missing_raises_not_found(self):
        repo = MagicMock()
        repo.update.return_value = None

        with pytest.raises(NotFound):
            TestimonialService(repo).update(9, {'name': 'Jane', 'text': 'Nice'})

    def test_soft_delete_unknown_is_silent(self):
        repo = MagicMock()
        repo.soft_delete.return_value = 0

        assert TestimonialService(repo).soft_delete(404) is None


class TestTestimonialRepository:

    def test_reads_hide_deleted_rows(self):
        db = MagicMock()
        cursor = db.get_conn.return_value.cursor.return_value
        cursor.fetchall.return_value = [{'id': 1, 'created_at': datetime(2024, 1, 2)}]

        rows = TestimonialRepository(db).get_visible()

        sql = ' '.join(cursor.execute.call_args[0][0].split())
        assert 'WHERE deleted_at IS NULL ORDER BY created_at DESC' in sql
        assert rows[0]['created_at'] == '2024-01-02T00:00:00'


class TestInquiryService:

    def _photo(self, name):
        return FileStorage(stream=io.BytesIO(b'photo'), filename=name, content_type='image/jpeg')

    def test_counts_photos_and_closes_them(self):
        repo = MagicMock()
        repo.create.return_value = {'id': 3, 'photos_count': 3}
        photos = [self._photo('1.jpg'), self._photo('2.jpg'), self._photo('3.jpg')]

        InquiryService(repo).submit({'name': 'Jane', 'phone': '0712345678'}, photos)

        fields = repo.create.call_args[0][0]
        assert fields['photos_count'] == 3
        assert all(p.stream.closed for p in photos)

    def test_no_photos_counts_zero(self):
        repo = MagicMock()
        repo.create.return_value = {'id': 4}

        InquiryService(repo).submit({'name': 'Jane', 'phone': ''})

        fields = repo.create.call_args[0][0]
        assert fields['photos_count'] == 0
        assert fields['phone'] == ''

    def test_store_error_propagates(self):
        repo = MagicMock()
        repo.create.side_effect = RuntimeError('null value in column "name"')

        with pytest.raises(RuntimeError):
            InquiryService(repo).submit({})


class TestBackupService:

    def test_export_shape(self):
        listings = MagicMock()
        testimonials = MagicMock()
        listings.list_all_visible.return_value = [
            {'id': 1, 'featured': True, 'images': []},
            {'id': 2, 'featured': False, 'images': [{'id': 9}]},
        ]
        testimonials.list.return_value = [{'id': 5}]

        export = BackupService(listings, testimonials).export()

        assert [listing['id'] for listing in export['listings']] == [1, 2]
        assert export['testimonials'] == [{'id': 5}]
        assert export['format_version'] == FORMAT_VERSION
        assert datetime.fromisoformat(export['generated_at'])
        listings.list.assert_not_called()
