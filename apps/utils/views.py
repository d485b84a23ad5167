# apps/utils/views.py
from rest_framework.views import APIView
from rest_framework.response import Response
from django.conf import settings

from .serializers import ServerInfoSerializer


class ServerInfoView(APIView):
    def get(self, request):
        serializer = ServerInfoSerializer({
            "app_name": "Bakery",
            "version": settings.SPECTACULAR_SETTINGS["VERSION"],
            "debug": settings.DEBUG,
        })
        return Response(serializer.data)
