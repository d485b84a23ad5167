from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import CustomCakeRequestViewSet

router = SimpleRouter()
router.register(r'', CustomCakeRequestViewSet, basename='custom-request')

urlpatterns = [
    path('', include(router.urls)),
]
