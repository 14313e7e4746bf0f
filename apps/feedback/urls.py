from django.urls import path
from . import views

app_name = 'feedback'

urlpatterns = [
    path('parties/<uuid:party_id>/', views.party_feedback, name='party-feedback'),
    path('parties/<uuid:party_id>/stats/', views.feedback_stats, name='party-feedback-stats'),
    path('parties/<uuid:party_id>/mine/', views.my_feedback_status, name='party-feedback-mine'),
    path('hosted/', views.hosted_feedback, name='hosted-feedback'),
]
