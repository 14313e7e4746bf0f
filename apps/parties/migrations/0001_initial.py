import uuid
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Party',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('location', models.CharField(max_length=300)),
                ('date_time', models.DateTimeField(db_index=True)),
                ('max_attendees', models.PositiveIntegerField(blank=True, null=True)),
                ('requires_payment', models.BooleanField(default=False)),
                ('payment_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('venmo_username', models.CharField(blank=True, max_length=100)),
                ('payment_description', models.CharField(blank=True, max_length=200)),
                ('university', models.CharField(db_index=True, max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('host', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='hosted_parties', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'parties',
                'db_table': 'parties',
                'ordering': ['date_time'],
                'indexes': [
                    models.Index(fields=['university', 'date_time'], name='parties_univers_3f0a1c_idx'),
                    models.Index(fields=['host', 'date_time'], name='parties_host_id_8b2e47_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PartyAttendance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('party', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendances', to='parties.party')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='party_attendances', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'party_attendances',
                'ordering': ['joined_at'],
                'indexes': [
                    models.Index(fields=['user', 'joined_at'], name='party_atten_user_id_1d9c52_idx'),
                ],
                'unique_together': {('party', 'user')},
            },
        ),
        migrations.AddField(
            model_name='party',
            name='attendees',
            field=models.ManyToManyField(related_name='joined_parties', through='parties.PartyAttendance', to=settings.AUTH_USER_MODEL),
        ),
        migrations.CreateModel(
            name='PartyPayment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('transaction_reference', models.CharField(blank=True, max_length=200)),
                ('is_paid', models.BooleanField(default=False)),
                ('paid_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('party', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payments', to='parties.party')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='party_payments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'party_payments',
                'unique_together': {('party', 'user')},
            },
        ),
    ]
