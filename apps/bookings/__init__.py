"""Bookings app package.

This app encapsulates the reservation ledger and the booking engine that
admits and cancels time-ranged parking reservations. Admission and
cancellation each run as one database transaction spanning the overlap
count, the conditional capacity update on the lot and the ledger write.
"""
