from django.urls import path
from . import views

app_name = 'games'

urlpatterns = [
    path('', views.games, name='games'),
    path('university/', views.university_games, name='university-games'),
    path('mine/', views.my_games, name='my-games'),
    path('<uuid:game_id>/', views.game_detail, name='game-detail'),
    path('parties/<uuid:party_id>/', views.party_games, name='party-games'),
    path('party-games/<uuid:party_game_id>/join/', views.join_game, name='party-game-join'),
    path('party-games/<uuid:party_game_id>/remove/', views.remove_game, name='party-game-remove'),
]
