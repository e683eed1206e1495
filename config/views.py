"""Service-level endpoints."""

from django.utils import timezone  # type: ignore
from rest_framework.decorators import api_view  # type: ignore
from rest_framework.response import Response  # type: ignore


@api_view(['GET'])
def health_check(request):  # type: ignore
    return Response({
        'status': 'ok',
        'service': 'Parking Reservation API',
        'timestamp': timezone.now().isoformat(),
    })
