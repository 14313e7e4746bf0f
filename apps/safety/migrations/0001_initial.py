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
            name='DesignatedDriver',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('phone', models.CharField(blank=True, max_length=30)),
                ('vehicle', models.CharField(blank=True, max_length=100)),
                ('seats', models.PositiveSmallIntegerField(default=4)),
                ('departure_time', models.DateTimeField(blank=True, null=True)),
                ('destination', models.CharField(blank=True, max_length=300)),
                ('active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('party', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='designated_drivers', to='parties.party')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='driver_registrations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'designated_drivers',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['party', 'active'], name='designated__party_i_5c7e21_idx')],
                'unique_together': {('party', 'user')},
            },
        ),
        migrations.CreateModel(
            name='RideRequest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('pickup_location', models.CharField(blank=True, max_length=300)),
                ('pickup_time', models.DateTimeField(blank=True, null=True)),
                ('destination', models.CharField(blank=True, max_length=300)),
                ('passengers', models.PositiveSmallIntegerField(default=1)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('declined', 'Declined'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('driver', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ride_requests', to='safety.designateddriver')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ride_requests', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'ride_requests',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['driver', 'status'], name='ride_reques_driver__0a4d93_idx')],
            },
        ),
        migrations.CreateModel(
            name='DrinkLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('total_drinks', models.PositiveIntegerField(default=0)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='drink_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'drink_logs',
                'ordering': ['-date'],
                'unique_together': {('user', 'date')},
            },
        ),
        migrations.CreateModel(
            name='DrinkEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('drink_type', models.CharField(choices=[('beer', 'Beer'), ('wine', 'Wine'), ('liquor', 'Liquor'), ('other', 'Other')], default='other', max_length=20)),
                ('alcohol_content', models.DecimalField(decimal_places=1, default=5, max_digits=4)),
                ('ounces', models.DecimalField(decimal_places=1, default=12, max_digits=5)),
                ('consumed_at', models.DateTimeField()),
                ('log', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='safety.drinklog')),
            ],
            options={
                'verbose_name_plural': 'drink entries',
                'db_table': 'drink_entries',
                'ordering': ['consumed_at'],
            },
        ),
    ]
