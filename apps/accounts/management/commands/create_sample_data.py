"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 4 students (alice, bob, charlie at Carleton; dana at UMN)
- 3 parties (free, capped, paid)
- A designated driver, an expense pool with expenses
- A playlist with songs and a few catalog games
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.parties.models import Party
from apps.parties.services import create_party, join_party
from apps.safety.services import register_as_dd
from apps.expenses.services import create_expense_pool, join_expense_pool, add_expense
from apps.playlists.services import create_playlist, add_song
from apps.games.models import Game, GameCategory
from apps.games.services import add_game_to_party


STUDENTS = [
    ('alice@carleton.edu', 'alice', 'Carleton College', 'alice-c'),
    ('bob@carleton.edu', 'bob', 'Carleton College', ''),
    ('charlie@carleton.edu', 'charlie', 'Carleton College', ''),
    ('dana@umn.edu', 'dana', 'University of Minnesota', 'dana-umn'),
]

GAMES = [
    ('Beer Pong', GameCategory.DRINKING, ['Carleton College', 'University of Minnesota']),
    ('Flip Cup', GameCategory.DRINKING, ['Carleton College']),
    ('Codenames', GameCategory.CARD, ['Carleton College', 'University of Minnesota']),
    ('Spikeball', GameCategory.OUTDOOR, ['University of Minnesota']),
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        games = self.create_games()
        parties = self.create_parties(users)
        self.create_activity(users, parties, games)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts (password123):')
        for email, *_ in STUDENTS:
            self.stdout.write(f'  {email}')

    def clear_data(self):
        """Clear sample data. Cascades remove attendance, expenses and playlists."""
        emails = [email for email, *_ in STUDENTS]
        Party.objects.filter(host__email__in=emails).delete()
        Game.objects.filter(name__in=[name for name, *_ in GAMES]).delete()
        User.objects.filter(email__in=emails).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        users = {}
        for email, username, university, venmo in STUDENTS:
            user, _ = User.objects.get_or_create(
                email=email,
                defaults={
                    'username': username,
                    'university': university,
                    'venmo_username': venmo,
                },
            )
            user.set_password('password123')
            user.save()
            users[username] = user

        return users

    def create_games(self):
        self.stdout.write('  Creating games...')

        games = {}
        for name, category, universities in GAMES:
            game, _ = Game.objects.get_or_create(
                name=name,
                defaults={
                    'category': category,
                    'universities': universities,
                    'is_public': True,
                },
            )
            games[name] = game

        return games

    def create_parties(self, users):
        self.stdout.write('  Creating parties...')

        now = timezone.now()
        open_house = create_party(
            host=users['alice'],
            title='Burton Open House',
            location='Burton Hall',
            date_time=now + timedelta(days=2),
            description='Snacks, music and games.',
        )
        game_night = create_party(
            host=users['bob'],
            title='Game Night',
            location='Goodsell Observatory lawn',
            date_time=now + timedelta(days=5),
            max_attendees=6,
        )
        formal = create_party(
            host=users['dana'],
            title='Winter Formal',
            location='Coffman Union',
            date_time=now + timedelta(days=14),
            requires_payment=True,
            payment_amount=Decimal('15.00'),
            venmo_username=users['dana'].venmo_username,
            payment_description='Formal ticket',
        )

        for user in (users['bob'], users['charlie']):
            join_party(party_id=open_house.id, user=user)
        join_party(party_id=game_night.id, user=users['charlie'])

        return {
            'open_house': open_house,
            'game_night': game_night,
            'formal': formal,
        }

    def create_activity(self, users, parties, games):
        self.stdout.write('  Creating drivers, expenses, playlists and party games...')

        open_house = parties['open_house']

        register_as_dd(party_id=open_house.id, user=users['charlie'], seats=3, vehicle='Blue Subaru')

        pool = create_expense_pool(
            party_id=open_house.id,
            creator=users['alice'],
            name='Snacks',
            venmo_username=users['alice'].venmo_username,
        )
        join_expense_pool(pool_id=pool.id, user=users['bob'])
        add_expense(party_id=open_house.id, paid_by=users['alice'], amount=Decimal('42.50'), description='Chips and soda')
        add_expense(party_id=open_house.id, paid_by=users['bob'], amount=Decimal('18.00'), description='Ice')

        playlist = create_playlist(party_id=open_house.id, creator=users['bob'], name='Open House Mix')
        add_song(playlist_id=playlist.id, user=users['bob'], title='Mr. Brightside', artist='The Killers')
        add_song(playlist_id=playlist.id, user=users['charlie'], title='September', artist='Earth, Wind & Fire')

        for name in ('Codenames', 'Flip Cup'):
            add_game_to_party(party_id=parties['game_night'].id, game_id=games[name].id, user=users['bob'])
