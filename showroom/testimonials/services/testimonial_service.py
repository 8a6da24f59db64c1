"""Business logic for testimonials."""
import logging

from showroom.core.errors import NotFound, ValidationError
from showroom.core.utils.api_helpers import blank_to_none

logger = logging.getLogger('showroom.testimonials.service')

DEFAULT_COLOR = 'orange'


def testimonial_fields(data):
    name = str(data.get('name') or '').strip()
    text = str(data.get('text') or '').strip()
    if not name or not text:
        raise ValidationError('Name and text are required')
    return {
        'name': name,
        'location': data.get('location'),
        'text': text,
        'color': blank_to_none(data.get('color')) or DEFAULT_COLOR,
    }


class TestimonialService:

    def __init__(self, testimonial_repo):
        self.testimonial_repo = testimonial_repo

    def list(self):
        return self.testimonial_repo.get_visible()

    def create(self, data):
        testimonial = self.testimonial_repo.create(testimonial_fields(data))
        logger.info(f"Created testimonial {testimonial['id']} from {testimonial['name']}")
        return testimonial

    def update(self, testimonial_id, data):
        testimonial = self.testimonial_repo.update(testimonial_id, testimonial_fields(data))
        if not testimonial:
            raise NotFound('Testimonial not found')
        logger.info(f'Updated testimonial {testimonial_id}')
        return testimonial

    def soft_delete(self, testimonial_id):
        if self.testimonial_repo.soft_delete(testimonial_id):
            logger.info(f'Soft-deleted testimonial {testimonial_id}')
