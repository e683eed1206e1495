from dataclasses import dataclass

import pytest

from apps.lots.models import Lot
from shared.application.message_bus import message_bus
from shared.application.uow import DjangoUnitOfWork
from shared.domain.base import DomainEvent


@dataclass
class LotTouched(DomainEvent):
    name: str


@pytest.fixture
def received():
    events = []
    handler = events.append
    message_bus.register_event_handler(LotTouched, handler)
    yield events
    message_bus.unregister_event_handler(LotTouched, handler)


@pytest.mark.django_db
def test_events_are_published_after_commit(received, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with DjangoUnitOfWork() as uow:
            Lot.objects.create(name="Committed", total_slots=1)
            uow.add_event(LotTouched(name="Committed"))
            assert received == []

    assert len(callbacks) == 1
    assert [event.name for event in received] == ["Committed"]


@pytest.mark.django_db
def test_exception_rolls_back_writes_and_drops_events(received, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(RuntimeError):
            with DjangoUnitOfWork() as uow:
                Lot.objects.create(name="Rolled back", total_slots=1)
                uow.add_event(LotTouched(name="Rolled back"))
                raise RuntimeError("fail mid-transaction")

    assert callbacks == []
    assert received == []
    assert not Lot.objects.filter(name="Rolled back").exists()
