"""Parking lots app package.

Holds the resource registry: each lot's fixed slot capacity, its
real-time available slot counter and its hourly rate. The available
counter is only ever changed through conditional row updates issued by
:class:`apps.lots.registry.LotRegistry`.
"""
