# nepali_calendar_api/urls.py
from django.urls import path, re_path, include

from bs_calendar import views
from bs_calendar.middleware import not_found

urlpatterns = [
    path('', views.index, name='index'),
    path('api/', include('bs_calendar.urls')),
    # Last, so unknown routes get the JSON 404 even with DEBUG on
    re_path(r'^', not_found),
]

# Http404 raised inside a view
handler404 = 'bs_calendar.middleware.not_found'
