from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LinkCategory",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("name", models.CharField(max_length=200, unique=True)),
                ("slug", models.SlugField(blank=True, max_length=200, unique=True)),
            ],
            options={
                "ordering": ["name"],
                "verbose_name_plural": "link categories",
            },
        ),
        migrations.CreateModel(
            name="Bookmark",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("url", models.CharField(max_length=500)),
                ("name", models.CharField(max_length=255)),
                ("description", models.CharField(blank=True, max_length=500)),
                (
                    "image",
                    models.CharField(
                        blank=True,
                        help_text="URL of an image or icon; media library URLs are rendered as managed images.",
                        max_length=500,
                    ),
                ),
                (
                    "target",
                    models.CharField(
                        blank=True,
                        choices=[("", "None"), ("_blank", "New window"), ("_top", "Top frame")],
                        max_length=25,
                    ),
                ),
                ("rel", models.CharField(blank=True, max_length=255)),
                ("visible", models.BooleanField(default=True)),
                ("notes", models.TextField(blank=True)),
                (
                    "categories",
                    models.ManyToManyField(
                        blank=True, related_name="bookmarks", to="links.linkcategory"
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
                "indexes": [models.Index(fields=["name"], name="links_bookmark_name_idx")],
            },
        ),
    ]
