import uuid
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('parties', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Game',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('rules', models.TextField(blank=True)),
                ('category', models.CharField(choices=[('drinking', 'Drinking'), ('card', 'Card'), ('party', 'Party'), ('outdoor', 'Outdoor'), ('other', 'Other')], default='other', max_length=20)),
                ('universities', models.JSONField(blank=True, default=list)),
                ('popularity', models.PositiveIntegerField(db_index=True, default=0)),
                ('is_public', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('creator', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_games', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'games',
                'ordering': ['-popularity', 'name'],
            },
        ),
        migrations.CreateModel(
            name='PartyGame',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('added_at', models.DateTimeField(auto_now_add=True)),
                ('is_active', models.BooleanField(default=True)),
                ('added_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='added_party_games', to=settings.AUTH_USER_MODEL)),
                ('game', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='party_games', to='games.game')),
                ('party', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='party_games', to='parties.party')),
            ],
            options={
                'db_table': 'party_games',
                'ordering': ['-added_at'],
            },
        ),
        migrations.CreateModel(
            name='PartyGameParticipant',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('party_game', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='games.partygame')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='party_game_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'party_game_participants',
                'ordering': ['joined_at'],
                'unique_together': {('party_game', 'user')},
            },
        ),
        migrations.AddField(
            model_name='partygame',
            name='participants',
            field=models.ManyToManyField(related_name='joined_party_games', through='games.PartyGameParticipant', to=settings.AUTH_USER_MODEL),
        ),
    ]
