"""Base views for the Site Counts API."""

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny


class SiteCountsBaseAPIView(APIView):
    """
    Base API view for all public rendering endpoints.

    Provides:
    - Anonymous access (rendered fragments are public page content)
    - Common serializer context
    """
    permission_classes = [AllowAny]

    def get_serializer_context(self):
        """Return context dict for serializers."""
        return {"request": self.request}
