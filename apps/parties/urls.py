from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'parties'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.PartyViewSet, basename='party')

urlpatterns = [
    # GET    /api/parties/                 - Parties at caller's university
    # POST   /api/parties/                 - Host a party
    # GET    /api/parties/{id}/            - Party details with viewer flags
    # PUT    /api/parties/{id}/            - Update party (host)
    # PATCH  /api/parties/{id}/            - Partial update (host)
    # POST   /api/parties/{id}/join/       - Join (201 / 200 / 402)
    # POST   /api/parties/{id}/leave/      - Leave
    # GET    /api/parties/{id}/payment/    - Payment status
    # POST   /api/parties/{id}/payment/    - Submit Venmo reference
    # GET    /api/parties/{id}/attendees/  - Attendees in join order
    # GET    /api/parties/hosted/          - Caller's hosted parties
    # GET    /api/parties/joined/          - Caller's joined parties
    path('', include(router.urls)),
]
