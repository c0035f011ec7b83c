from django.urls import path
from . import views

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('state-comparison/', views.state_comparison, name='state_comparison'),
    path('compare/', views.compare, name='compare'),
]
