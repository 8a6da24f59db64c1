"""Business logic for motorcycle listings and their images."""
import logging
from collections import defaultdict

from showroom.core.errors import NotFound, ValidationError
from showroom.core.utils.api_helpers import as_bool, blank_to_none

logger = logging.getLogger('showroom.listings.service')


def sort_images(images):
    """Primary image first, then by upload time ascending (id breaks ties)."""
    return sorted(images, key=lambda img: (
        not img.get('is_primary'),
        img.get('uploaded_at') or '',
        img.get('id') or 0,
    ))


def listing_fields(data):
    """Normalise submitted listing fields for a full-row insert/replace."""
    name = data.get('name')
    if isinstance(name, str):
        name = name.strip()
    if not name:
        raise ValidationError('Name is required')

    year = blank_to_none(data.get('year'))
    if year is not None:
        if isinstance(year, bool) or (isinstance(year, float) and not year.is_integer()):
            raise ValidationError('Year must be a number')
        try:
            year = int(year)
        except (TypeError, ValueError):
            raise ValidationError('Year must be a number')

    mileage = blank_to_none(data.get('mileage'))
    return {
        'name': name,
        'price': blank_to_none(data.get('price')),
        'description': data.get('description'),
        'year': year,
        'mileage': str(mileage) if mileage is not None else None,
        'location': data.get('location'),
        'featured': as_bool(data.get('featured'), True),
    }


class ListingService:
    """Orchestrates listing reads/writes and image uploads."""

    def __init__(self, listing_repo, image_repo, uploads):
        self.listing_repo = listing_repo
        self.image_repo = image_repo
        self.uploads = uploads

    def with_images(self, listings):
        """Attach each listing's sorted images (empty list when it has none)."""
        by_listing = defaultdict(list)
        for image in self.image_repo.get_for_listings([listing['id'] for listing in listings]):
            by_listing[image['motorcycle_id']].append(image)
        for listing in listings:
            listing['images'] = sort_images(by_listing.get(listing['id'], []))
        return listings

    def list(self):
        """Public feed: visible, featured listings, newest first."""
        return self.with_images(self.listing_repo.get_featured())

    def list_all_visible(self):
        return self.with_images(self.listing_repo.get_all_visible())

    def get(self, listing_id):
        listing = self.listing_repo.get_visible_by_id(listing_id)
        if not listing:
            raise NotFound('Motorcycle not found')
        return self.with_images([listing])[0]

    def create(self, data):
        listing = self.listing_repo.create(listing_fields(data))
        logger.info(f"Created motorcycle {listing['id']} ({listing['name']})")
        return listing

    def update(self, listing_id, data):
        listing = self.listing_repo.update(listing_id, listing_fields(data))
        if not listing:
            raise NotFound('Motorcycle not found')
        logger.info(f'Updated motorcycle {listing_id}')
        return listing

    def soft_delete(self, listing_id):
        """Hide a listing. Unknown or already deleted ids are a silent no-op."""
        if self.listing_repo.soft_delete(listing_id):
            logger.info(f'Soft-deleted motorcycle {listing_id}')

    def attach_images(self, listing_id, files, base_url):
        """Store uploaded images and their rows for a visible listing.

        Files are written first; if the listing is missing or any insert
        fails, every file written for this request is removed again and no
        image row survives (the inserts share one transaction).
        """
        if not files:
            raise ValidationError('No files uploaded')

        stored = self.uploads.save(files, prefix='motorcycle')
        try:
            rows = self.image_repo.add_batch(listing_id, [{
                'url': self.uploads.public_url(base_url, upload.filename),
                'original_name': upload.original_name,
                'size': upload.size,
            } for upload in stored])
            if rows is None:
                raise NotFound('Motorcycle not found')
        except Exception:
            self.uploads.cleanup(stored)
            raise

        logger.info(f'Attached {len(rows)} image(s) to motorcycle {listing_id}')
        return rows
