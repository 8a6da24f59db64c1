"""Operator-initiated export of listings and testimonials.

The two reads are not wrapped in one transaction; the snapshot is
consistent enough for a manual backup, not point-in-time exact.
"""
import logging
from datetime import datetime, timezone

logger = logging.getLogger('showroom.backup.service')

FORMAT_VERSION = '1.0'


class BackupService:

    def __init__(self, listing_service, testimonial_service):
        self.listing_service = listing_service
        self.testimonial_service = testimonial_service

    def export(self):
        listings = self.listing_service.list_all_visible()
        testimonials = self.testimonial_service.list()
        logger.info(f'Exported {len(listings)} listing(s) and {len(testimonials)} testimonial(s)')
        return {
            'listings': listings,
            'testimonials': testimonials,
            'generated_at': datetime.now(timezone.utc).isoformat(),
            'format_version': FORMAT_VERSION,
        }
