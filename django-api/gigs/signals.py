"""Django signals for cache invalidation.

Schedule cache entries are dropped once the surrounding transaction commits,
so a rolled-back change never evicts a valid entry and a reader never
re-caches uncommitted state.
"""

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from gigs.cache import schedule_key
from gigs.models import Gig, Performance


def _invalidate_schedule(gig_id: int) -> None:
    transaction.on_commit(lambda: cache.delete(schedule_key(gig_id)))


@receiver([post_save, post_delete], sender=Gig)
def invalidate_gig_cache(sender, instance, **kwargs):
    """Invalidate the schedule when a gig is saved or deleted."""
    _invalidate_schedule(instance.pk)


@receiver([post_save, post_delete], sender=Performance)
def invalidate_performance_cache(sender, instance, **kwargs):
    """Invalidate the schedule when a performance is saved or deleted."""
    _invalidate_schedule(instance.gig_id)
