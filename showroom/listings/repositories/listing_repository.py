"""Listing Repository - Data access layer for the motorcycles table.

Rows are never physically deleted: a listing is hidden by stamping
deleted_at, and every read filters on deleted_at IS NULL.
"""
from typing import Optional, Dict, Any, List

from showroom.core.base_repository import BaseRepository


class ListingRepository(BaseRepository):
    """Repository for motorcycle listing operations."""

    def get_featured(self) -> List[Dict[str, Any]]:
        """Visible, featured listings for the public feed, newest first."""
        return self.query_all('''
            SELECT * FROM motorcycles
            WHERE deleted_at IS NULL AND featured = TRUE
            ORDER BY created_at DESC
        ''')

    def get_all_visible(self) -> List[Dict[str, Any]]:
        """Every visible listing regardless of the featured flag."""
        return self.query_all('''
            SELECT * FROM motorcycles
            WHERE deleted_at IS NULL
            ORDER BY created_at DESC
        ''')

    def get_visible_by_id(self, listing_id: int) -> Optional[Dict[str, Any]]:
        return self.query_one('''
            SELECT * FROM motorcycles
            WHERE id = %s AND deleted_at IS NULL
        ''', (listing_id,))

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a listing and return the stored row."""
        return self.execute('''
            INSERT INTO motorcycles (name, price, description, year, mileage, location, featured)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            RETURNING *
        ''', (
            fields['name'], fields.get('price'), fields.get('description'),
            fields.get('year'), fields.get('mileage'), fields.get('location'),
            fields['featured'],
        ), returning=True)

    def update(self, listing_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Replace every mutable column of a visible listing.

        Returns the updated row, or None if no visible listing has that id.
        """
        return self.execute('''
            UPDATE motorcycles
            SET name = %s, price = %s, description = %s, year = %s,
                mileage = %s, location = %s, featured = %s,
                updated_at = CURRENT_TIMESTAMP
            WHERE id = %s AND deleted_at IS NULL
            RETURNING *
        ''', (
            fields['name'], fields.get('price'), fields.get('description'),
            fields.get('year'), fields.get('mileage'), fields.get('location'),
            fields['featured'], listing_id,
        ), returning=True)

    def soft_delete(self, listing_id: int) -> int:
        """Stamp deleted_at. Returns rowcount (0 for unknown or already deleted ids)."""
        return self.execute('''
            UPDATE motorcycles SET deleted_at = CURRENT_TIMESTAMP
            WHERE id = %s AND deleted_at IS NULL
        ''', (listing_id,))
