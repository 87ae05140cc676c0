from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PurchaseEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('username', models.CharField(db_index=True, max_length=150)),
                ('points', models.IntegerField()),
                ('awarded_at', models.DateTimeField(db_index=True)),
            ],
            options={
                'verbose_name': 'Purchase Event',
                'verbose_name_plural': 'Purchase Events',
                'db_table': 'purchase_events',
                'ordering': ['-awarded_at', '-id'],
                'indexes': [models.Index(fields=['username', 'awarded_at'], name='purchase_events_user_time_idx')],
            },
        ),
    ]
