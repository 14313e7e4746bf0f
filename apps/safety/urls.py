from django.urls import path
from . import views

app_name = 'safety'

urlpatterns = [
    # Designated drivers
    path('parties/<uuid:party_id>/drivers/', views.party_drivers, name='party-drivers'),
    path('drivers/<uuid:driver_id>/rides/', views.driver_rides, name='driver-rides'),

    # Drinks and BAC
    path('drinks/', views.drinks, name='drinks'),
    path('bac/', views.bac_estimate, name='bac'),
]
