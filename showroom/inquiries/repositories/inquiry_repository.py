"""Repository for inquiries table. Rows are append-only."""
from showroom.core.base_repository import BaseRepository


class InquiryRepository(BaseRepository):

    def create(self, fields):
        return self.execute('''
            INSERT INTO inquiries (name, phone, model, year, details, photos_count)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING *
        ''', (
            fields.get('name'), fields.get('phone'), fields.get('model'),
            fields.get('year'), fields.get('details'), fields['photos_count'],
        ), returning=True)
