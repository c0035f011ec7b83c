from django.urls import path
from . import views

urlpatterns = [
    path('detect/', views.detect_district, name='detect_district'),
]
