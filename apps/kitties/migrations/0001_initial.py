from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Kitty",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(help_text="Creator contact", max_length=254)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("kitty_type", models.CharField(help_text="Category tag", max_length=100)),
                (
                    "beneficiary_count",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                ("maturity_date", models.DateTimeField()),
                ("address", models.CharField(max_length=255, unique=True)),
                ("amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "kitty",
                "verbose_name_plural": "kitties",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["email"], name="kitty_email_idx"),
                    models.Index(fields=["maturity_date"], name="kitty_maturity_idx"),
                ],
            },
        ),
    ]
