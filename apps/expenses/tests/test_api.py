import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.expenses.models import ExpensePool, Expense


@pytest.mark.django_db
class TestPoolEndpoints:
    """Tests for expense pool endpoints."""

    def test_create_and_list(self, alice_client, party):
        url = reverse('expenses:party-pools', kwargs={'party_id': party.id})

        created = alice_client.post(url, {'name': 'Drinks'}, format='json')
        listing = alice_client.get(url)

        assert created.status_code == status.HTTP_201_CREATED
        assert created.data['creator']['username'] == 'alice'
        assert [p['name'] for p in listing.data] == ['Drinks']

    def test_outsider_cannot_create(self, outsider_client, party):
        url = reverse('expenses:party-pools', kwargs={'party_id': party.id})
        response = outsider_client.post(url, {'name': 'Drinks'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_join_leave_and_settle(self, alice_client, host_client, party):
        created = alice_client.post(
            reverse('expenses:party-pools', kwargs={'party_id': party.id}),
            {'name': 'Drinks'},
            format='json'
        )
        pool_id = created.data['id']

        joined = host_client.post(reverse('expenses:pool-join', kwargs={'pool_id': pool_id}))
        creator_leave = alice_client.post(reverse('expenses:pool-leave', kwargs={'pool_id': pool_id}))
        not_creator_settle = host_client.post(reverse('expenses:pool-settle', kwargs={'pool_id': pool_id}))
        settled = alice_client.post(reverse('expenses:pool-settle', kwargs={'pool_id': pool_id}))

        assert joined.status_code == status.HTTP_200_OK
        assert len(joined.data['participants']) == 2
        assert creator_leave.status_code == status.HTTP_400_BAD_REQUEST
        assert not_creator_settle.status_code == status.HTTP_403_FORBIDDEN
        assert settled.data['is_settled'] is True
        assert ExpensePool.objects.get(id=pool_id).is_settled is True

    def test_balances(self, alice_client, party, alice):
        created = alice_client.post(
            reverse('expenses:party-pools', kwargs={'party_id': party.id}),
            {'name': 'Drinks'},
            format='json'
        )
        Expense.objects.create(party=party, paid_by=alice, amount=Decimal('20.00'))

        response = alice_client.get(
            reverse('expenses:pool-balances', kwargs={'pool_id': created.data['id']})
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['paid'] == '20.00'
        assert response.data[0]['net_balance'] == '0.00'


@pytest.mark.django_db
class TestExpenseEndpoints:
    """Tests for expense endpoints."""

    def test_add_expense_and_settle(self, alice_client, host_client, party):
        url = reverse('expenses:party-expenses', kwargs={'party_id': party.id})

        created = alice_client.post(url, {'amount': '15.00', 'description': 'Pizza'}, format='json')
        to_settle = host_client.get(reverse('expenses:to-settle'))
        settled = host_client.post(reverse('expenses:expense-settle', kwargs={'expense_id': created.data['id']}))
        after = host_client.get(reverse('expenses:to-settle'))
        paid = alice_client.get(reverse('expenses:paid'))

        assert created.status_code == status.HTTP_201_CREATED
        assert len(created.data['split_with']) == 3
        assert [e['description'] for e in to_settle.data] == ['Pizza']
        assert settled.status_code == status.HTTP_200_OK
        assert after.data == []
        assert [e['description'] for e in paid.data] == ['Pizza']

    def test_non_positive_amount(self, alice_client, party):
        url = reverse('expenses:party-expenses', kwargs={'party_id': party.id})
        response = alice_client.post(url, {'amount': '0.00'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_split_with_subset(self, alice_client, party, bob):
        url = reverse('expenses:party-expenses', kwargs={'party_id': party.id})
        response = alice_client.post(
            url,
            {'amount': '6.00', 'split_with': [str(bob.id)]},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert [u['username'] for u in response.data['split_with']] == ['bob']
