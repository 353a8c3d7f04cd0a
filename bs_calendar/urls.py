from django.urls import path
from . import views

app_name = 'bs_calendar'

urlpatterns = [
    path('today', views.today, name='today'),

    # Conversion
    path('convert/ad-to-bs', views.convert_ad_to_bs, name='ad_to_bs'),
    path('convert/bs-to-ad', views.convert_bs_to_ad, name='bs_to_ad'),

    # Month grid for rendering a calendar page
    path('calendar/bs', views.calendar_month, name='calendar_month'),
]
