"""Repository for motorcycle_images table."""
from showroom.core.base_repository import BaseRepository
from showroom.database import dict_from_row


class ImageRepository(BaseRepository):

    def get_for_listings(self, listing_ids):
        """All images of the given listings, primary first then oldest upload first."""
        if not listing_ids:
            return []
        return self.query_all('''
            SELECT * FROM motorcycle_images
            WHERE motorcycle_id = ANY(%s)
            ORDER BY motorcycle_id, is_primary DESC, uploaded_at ASC, id ASC
        ''', (list(listing_ids),))

    def add_batch(self, listing_id, images):
        """Insert a batch of image rows for one listing in a single transaction.

        The listing row is locked and must be visible; returns None (and
        writes nothing) when it is missing or soft-deleted. The first image
        of a listing without images becomes its primary image.

        Args:
            listing_id: Owning listing
            images: list of dicts with url, original_name, size
        """
        def _work(cursor):
            cursor.execute('''
                SELECT id FROM motorcycles
                WHERE id = %s AND deleted_at IS NULL
                FOR UPDATE
            ''', (listing_id,))
            if not cursor.fetchone():
                return None

            cursor.execute('''
                SELECT EXISTS (
                    SELECT 1 FROM motorcycle_images WHERE motorcycle_id = %s
                ) AS has_images
            ''', (listing_id,))
            needs_primary = not cursor.fetchone()['has_images']

            rows = []
            for index, image in enumerate(images):
                cursor.execute('''
                    INSERT INTO motorcycle_images (motorcycle_id, url, original_name, size, is_primary)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING *
                ''', (
                    listing_id, image['url'], image['original_name'], image['size'],
                    needs_primary and index == 0,
                ))
                rows.append(dict_from_row(cursor.fetchone()))
            return rows

        return self.execute_many(_work)
