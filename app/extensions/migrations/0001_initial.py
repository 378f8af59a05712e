from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ExtensionSetting",
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
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                ("extension", models.CharField(db_index=True, max_length=64)),
                ("name", models.CharField(max_length=64)),
                ("value", models.JSONField(blank=True, null=True)),
            ],
            options={
                "ordering": ["extension", "name"],
                "abstract": False,
            },
        ),
        migrations.AddConstraint(
            model_name="extensionsetting",
            constraint=models.UniqueConstraint(
                fields=("extension", "name"), name="unique_extension_setting"
            ),
        ),
    ]
