from django.db import migrations, models


def fill_skills_text(apps, schema_editor):
    LaborListing = apps.get_model("listings", "LaborListing")
    for listing in LaborListing.objects.all().only("pk", "skills"):
        listing.skills_text = "\n".join(str(skill).lower() for skill in listing.skills or [])
        listing.save(update_fields=["skills_text"])


class Migration(migrations.Migration):

    dependencies = [
        ("listings", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="laborlisting",
            name="skills_text",
            field=models.TextField(blank=True, default="", editable=False),
        ),
        migrations.RunPython(fill_skills_text, migrations.RunPython.noop),
    ]
