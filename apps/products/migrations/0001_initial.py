from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tier_label', models.CharField(help_text='Tier key used for the points lookup', max_length=50, unique=True)),
                ('description', models.TextField(blank=True, default='')),
                ('points', models.IntegerField(help_text='Points shown in the catalog')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'db_table': 'products',
                'ordering': ['id'],
            },
        ),
    ]
