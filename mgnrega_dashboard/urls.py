from django.urls import path, include

urlpatterns = [
    path('', include('apps.performance.urls')),
    path('', include('apps.core.urls')),
    path('districts/', include('apps.districts.urls')),
]
