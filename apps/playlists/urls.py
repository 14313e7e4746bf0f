from django.urls import path
from . import views

app_name = 'playlists'

urlpatterns = [
    path('parties/<uuid:party_id>/', views.party_playlists, name='party-playlists'),
    path('<uuid:playlist_id>/songs/', views.playlist_songs, name='playlist-songs'),
    path('<uuid:playlist_id>/current/', views.current_song, name='current-song'),
    path('songs/<uuid:song_id>/vote/', views.vote_song, name='song-vote'),
    path('songs/<uuid:song_id>/played/', views.song_played, name='song-played'),
]
