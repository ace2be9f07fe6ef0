from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StoreConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("path", models.CharField(db_index=True, max_length=255)),
                ("scope", models.CharField(choices=[("default", "Por defecto"), ("store", "Tienda")], default="default", max_length=10)),
                ("scope_code", models.CharField(blank=True, default="", max_length=64)),
                ("value", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["path", "scope", "scope_code"],
            },
        ),
        migrations.AddConstraint(
            model_name="storeconfig",
            constraint=models.UniqueConstraint(fields=("path", "scope", "scope_code"), name="uniq_store_config_path_scope"),
        ),
    ]
