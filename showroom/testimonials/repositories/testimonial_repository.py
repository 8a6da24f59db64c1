"""Repository for testimonials table. Soft delete only."""
from showroom.core.base_repository import BaseRepository


class TestimonialRepository(BaseRepository):

    def get_visible(self):
        return self.query_all('''
            SELECT * FROM testimonials
            WHERE deleted_at IS NULL
            ORDER BY created_at DESC
        ''')

    def create(self, fields):
        return self.execute('''
            INSERT INTO testimonials (name, location, text, color)
            VALUES (%s, %s, %s, %s)
            RETURNING *
        ''', (fields['name'], fields.get('location'), fields['text'], fields['color']),
            returning=True)

    def update(self, testimonial_id, fields):
        """Replace all mutable columns of a visible testimonial; None if not visible."""
        return self.execute('''
            UPDATE testimonials
            SET name = %s, location = %s, text = %s, color = %s,
                updated_at = CURRENT_TIMESTAMP
            WHERE id = %s AND deleted_at IS NULL
            RETURNING *
        ''', (fields['name'], fields.get('location'), fields['text'], fields['color'],
              testimonial_id), returning=True)

    def soft_delete(self, testimonial_id):
        return self.execute('''
            UPDATE testimonials SET deleted_at = CURRENT_TIMESTAMP
            WHERE id = %s AND deleted_at IS NULL
        ''', (testimonial_id,))
