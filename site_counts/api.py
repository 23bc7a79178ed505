"""API views for the Site Counts block."""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response

from content.blocks import render_block
from content.models import ContentItem
from core.views import SiteCountsBaseAPIView

from .serializers import RenderQuerySerializer, RenderedBlockSerializer

BLOCK_NAME = "xwp/site-counts"


class SiteCountsRenderView(SiteCountsBaseAPIView):
    """
    GET /api/v1/site-counts/<item_id>/

    Render the Site Counts block as it appears on an item's page.
    """

    @extend_schema(
        summary="Render site counts block",
        description=(
            "Render the post counts and latest posts block for the given item. "
            "The result is cached per item until a public post changes status. "
            "The cache key is the item only, so className applies to the render "
            "that fills the cache and later requests get that same markup."
        ),
        parameters=[
            OpenApiParameter(
                name="item_id",
                type=int,
                location=OpenApiParameter.PATH,
                description="ID of the item the block is displayed on",
            ),
            OpenApiParameter(
                name="className",
                type=str,
                description=(
                    "Extra CSS class added to the block container. "
                    "Ignored while a cached fragment exists for the item"
                ),
            ),
        ],
        responses={200: RenderedBlockSerializer, 404: None},
        tags=["Site Counts"],
    )
    def get(self, request, item_id):
        """Render block."""
        params = RenderQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        if not ContentItem.objects.filter(pk=item_id).exists():
            return Response(
                {
                    "error": {
                        "code": "ITEM_NOT_FOUND",
                        "message": f"Content item not found: {item_id}",
                    }
                },
                status=status.HTTP_404_NOT_FOUND,
            )

        html = render_block(BLOCK_NAME, params.validated_data, item_id)
        serializer = RenderedBlockSerializer({"item_id": item_id, "html": html})
        return Response(serializer.data)
