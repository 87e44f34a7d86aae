import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("username", models.CharField(max_length=255, unique=True)),
                ("user_id", models.UUIDField(default=uuid.uuid4, editable=False)),
                ("events_created", models.JSONField(blank=True, default=list)),
                ("role", models.CharField(default="user", max_length=50)),
                ("created_at", models.DateTimeField()),
            ],
            options={
                "ordering": ["username"],
            },
        ),
        migrations.CreateModel(
            name="EventRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name_of_event", models.CharField(max_length=255, unique=True)),
                ("event_id", models.UUIDField(default=uuid.uuid4, editable=False)),
                ("owner", models.CharField(db_index=True, max_length=255)),
                ("event_poster", models.CharField(max_length=500)),
                ("location_of_event", models.CharField(max_length=255)),
                ("requirements", models.TextField()),
                ("date", models.CharField(max_length=100)),
                ("capacity", models.PositiveIntegerField()),
                ("is_public", models.BooleanField(default=True)),
                ("attendance", models.JSONField(blank=True, default=list)),
                ("version", models.PositiveIntegerField(default=1)),
                ("created_at", models.DateTimeField()),
            ],
            options={
                "ordering": ["name_of_event"],
            },
        ),
    ]
