"""Unit tests for ListingService.

Tests:
- sort_images: primary first then upload time, for every insertion order
- list / list_all_visible / get: nested images, empty image lists
- create / update: featured default, required name, year parsing, NotFound
- soft_delete: silent no-op for unknown ids
- attach_images: no files, missing listing cleanup, store failure cleanup, success
"""
import io
import os
import sys
from itertools import permutations

import pytest
from unittest.mock import MagicMock
from werkzeug.datastructures import FileStorage

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from showroom.core.errors import NotFound, ValidationError
from showroom.core.services.upload_service import UploadService
from showroom.listings.services.listing_service import ListingService, sort_images, listing_fields


def _service(upload_dir='/nonexistent'):
    listing_repo = MagicMock()
    image_repo = MagicMock()
    uploads = UploadService(str(upload_dir))
    return ListingService(listing_repo, image_repo, uploads), listing_repo, image_repo


def _file(name='bike.jpg', content_type='image/jpeg'):
    return FileStorage(stream=io.BytesIO(b'image-bytes'), filename=name, content_type=content_type)


IMAGES = [
    {'id': 1, 'motorcycle_id': 1, 'is_primary': False, 'uploaded_at': '2024-05-01T10:00:00'},
    {'id': 2, 'motorcycle_id': 1, 'is_primary': True, 'uploaded_at': '2024-05-01T12:00:00'},
    {'id': 3, 'motorcycle_id': 1, 'is_primary': False, 'uploaded_at': '2024-05-01T09:00:00.250000'},
    {'id': 4, 'motorcycle_id': 1, 'is_primary': False, 'uploaded_at': '2024-05-01T09:00:00'},
]


class TestSortImages:

    @pytest.mark.parametrize('order', list(permutations(IMAGES)))
    def test_primary_first_then_upload_time(self, order):
        assert [img['id'] for img in sort_images(list(order))] == [2, 4, 3, 1]

    def test_empty(self):
        assert sort_images([]) == []


class TestListingFields:

    def test_featured_defaults_to_true(self):
        assert listing_fields({'name': 'Honda CB150'})['featured'] is True
        assert listing_fields({'name': 'Honda CB150', 'featured': None})['featured'] is True

    def test_featured_false_is_kept(self):
        assert listing_fields({'name': 'X', 'featured': False})['featured'] is False
        assert listing_fields({'name': 'X', 'featured': 'false'})['featured'] is False

    def test_year_string_is_parsed(self):
        assert listing_fields({'name': 'X', 'year': '2020'})['year'] == 2020
        assert listing_fields({'name': 'X', 'year': ''})['year'] is None

    def test_bad_year_is_rejected(self):
        with pytest.raises(ValidationError):
            listing_fields({'name': 'X', 'year': 'twenty'})

    @pytest.mark.parametrize('year', [2020.7, '2020.7', True])
    def test_fractional_or_boolean_year_is_rejected(self, year):
        with pytest.raises(ValidationError) as exc:
            listing_fields({'name': 'X', 'year': year})
        assert exc.value.message == 'Year must be a number'

    def test_whole_float_year_is_accepted(self):
        assert listing_fields({'name': 'X', 'year': 2020.0})['year'] == 2020

    @pytest.mark.parametrize('data', [{}, {'name': ''}, {'name': '   '}, {'name': None}])
    def test_name_is_required(self, data):
        with pytest.raises(ValidationError):
            listing_fields(data)


class TestReads:

    def test_list_nests_sorted_images_and_empty_lists(self):
        svc, listing_repo, image_repo = _service()
        listing_repo.get_featured.return_value = [{'id': 1, 'name': 'A'}, {'id': 2, 'name': 'B'}]
        image_repo.get_for_listings.return_value = list(reversed(IMAGES))

        result = svc.list()

        image_repo.get_for_listings.assert_called_once_with([1, 2])
        assert [img['id'] for img in result[0]['images']] == [2, 4, 3, 1]
        assert result[1]['images'] == []

    def test_list_all_visible_uses_unfiltered_feed(self):
        svc, listing_repo, image_repo = _service()
        listing_repo.get_all_visible.return_value = []
        image_repo.get_for_listings.return_value = []

        assert svc.list_all_visible() == []
        listing_repo.get_featured.assert_not_called()

    def test_get_missing_raises_not_found(self):
        svc, listing_repo, _ = _service()
        listing_repo.get_visible_by_id.return_value = None

        with pytest.raises(NotFound):
            svc.get(3)


class TestWrites:

    def test_create_passes_featured_default(self):
        svc, listing_repo, _ = _service()
        listing_repo.create.return_value = {'id': 7, 'name': 'Honda CB150', 'featured': True}

        result = svc.create({'name': 'Honda CB150', 'price': 'KES 150000', 'year': '2020'})

        fields = listing_repo.create.call_args[0][0]
        assert fields['featured'] is True
        assert fields['year'] == 2020
        assert fields['price'] == 'KES 150000'
        assert 'images' not in result

    def test_update_missing_raises_not_found(self):
        svc, listing_repo, _ = _service()
        listing_repo.update.return_value = None

        with pytest.raises(NotFound):
            svc.update(99, {'name': 'X'})

    def test_update_replaces_all_fields(self):
        svc, listing_repo, _ = _service()
        listing_repo.update.return_value = {'id': 5}

        svc.update(5, {'name': 'Yamaha', 'featured': False})

        listing_id, fields = listing_repo.update.call_args[0]
        assert listing_id == 5
        assert set(fields) == {'name', 'price', 'description', 'year', 'mileage', 'location', 'featured'}
        assert fields['price'] is None

    def test_soft_delete_unknown_id_is_silent(self):
        svc, listing_repo, _ = _service()
        listing_repo.soft_delete.return_value = 0

        assert svc.soft_delete(12345) is None
        listing_repo.soft_delete.assert_called_once_with(12345)


class TestAttachImages:

    def test_no_files_is_validation_error(self, tmp_path):
        svc, _, image_repo = _service(tmp_path)
        with pytest.raises(ValidationError):
            svc.attach_images(1, [], 'http://localhost/')
        image_repo.add_batch.assert_not_called()

    def test_missing_listing_leaves_no_files(self, tmp_path):
        svc, _, image_repo = _service(tmp_path)
        image_repo.add_batch.return_value = None

        with pytest.raises(NotFound):
            svc.attach_images(404, [_file('a.jpg'), _file('b.png', 'image/png')], 'http://localhost/')

        assert os.listdir(tmp_path) == []

    def test_store_failure_leaves_no_files(self, tmp_path):
        svc, _, image_repo = _service(tmp_path)
        image_repo.add_batch.side_effect = RuntimeError('connection lost')

        with pytest.raises(RuntimeError):
            svc.attach_images(1, [_file('a.jpg')], 'http://localhost/')

        assert os.listdir(tmp_path) == []

    def test_success_builds_urls_from_request_host(self, tmp_path):
        svc, _, image_repo = _service(tmp_path)
        image_repo.add_batch.side_effect = lambda listing_id, images: [
            dict(img, id=i + 1, motorcycle_id=listing_id) for i, img in enumerate(images)
        ]

        rows = svc.attach_images(1, [_file('front.jpg'), _file('back.webp', 'image/webp')], 'https://shop.test/')

        assert len(rows) == 2
        assert rows[0]['url'].startswith('https://shop.test/uploads/motorcycle-')
        assert rows[0]['original_name'] == 'front.jpg'
        assert rows[1]['url'].endswith('.webp')
        assert len(os.listdir(tmp_path)) == 2
