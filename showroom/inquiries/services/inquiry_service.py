"""Business logic for customer inquiries.

Photos attached to an inquiry only travel with the client-side flow (they
are forwarded over messaging elsewhere); here they are counted and dropped,
never written to disk.
"""
import logging

logger = logging.getLogger('showroom.inquiries.service')


class InquiryService:

    def __init__(self, inquiry_repo):
        self.inquiry_repo = inquiry_repo

    def submit(self, data, photos=None):
        """Record an inquiry as submitted. Only the store's NOT NULLs apply."""
        photos_count = len(photos or [])
        for photo in photos or []:
            photo.close()

        inquiry = self.inquiry_repo.create({
            'name': data.get('name'),
            'phone': data.get('phone'),
            'model': data.get('model'),
            'year': data.get('year'),
            'details': data.get('details'),
            'photos_count': photos_count,
        })
        logger.info(f"Inquiry {inquiry['id']} received with {photos_count} photo(s)")
        return inquiry
