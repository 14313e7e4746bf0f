import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestFeedbackEndpoints:
    """Tests for /api/feedback/"""

    def test_submit_anonymous_hides_author(self, guest_client, past_party):
        url = reverse('feedback:party-feedback', kwargs={'party_id': past_party.id})

        created = guest_client.post(url, {'rating': 5, 'comment': 'Great'}, format='json')
        listing = guest_client.get(url)

        assert created.status_code == status.HTTP_201_CREATED
        assert listing.data[0]['user'] is None

    def test_named_feedback_shows_author(self, guest_client, past_party):
        url = reverse('feedback:party-feedback', kwargs={'party_id': past_party.id})
        guest_client.post(url, {'rating': 3, 'is_anonymous': False}, format='json')

        listing = guest_client.get(url)

        assert listing.data[0]['user']['username'] == 'guest'

    def test_submit_before_party(self, guest_client, future_party):
        url = reverse('feedback:party-feedback', kwargs={'party_id': future_party.id})
        response = guest_client.post(url, {'rating': 5}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_rating_out_of_range(self, guest_client, past_party):
        url = reverse('feedback:party-feedback', kwargs={'party_id': past_party.id})
        response = guest_client.post(url, {'rating': 9}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_stats_and_mine(self, guest_client, past_party):
        guest_client.post(
            reverse('feedback:party-feedback', kwargs={'party_id': past_party.id}),
            {'rating': 4},
            format='json'
        )

        stats = guest_client.get(reverse('feedback:party-feedback-stats', kwargs={'party_id': past_party.id}))
        mine = guest_client.get(reverse('feedback:party-feedback-mine', kwargs={'party_id': past_party.id}))

        assert stats.data['average_rating'] == 4.0
        assert stats.data['total_feedback'] == 1
        assert mine.data == {'submitted': True}

    def test_hosted(self, host_client, guest_client, past_party):
        guest_client.post(
            reverse('feedback:party-feedback', kwargs={'party_id': past_party.id}),
            {'rating': 2},
            format='json'
        )

        response = host_client.get(reverse('feedback:hosted-feedback'))

        assert response.status_code == status.HTTP_200_OK
        entry = response.data[str(past_party.id)]
        assert entry['party_title'] == 'Last Night'
        assert entry['feedback'][0]['rating'] == 2
