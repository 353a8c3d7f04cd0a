"""
Management command to convert a date between AD and BS
Usage: python manage.py convert_date --ad 2024-04-13
       python manage.py convert_date --bs 2081-01-01
"""
from datetime import datetime

from django.core.management.base import BaseCommand, CommandError

from bs_calendar.exceptions import CalendarError
from bs_calendar.utils import bs_to_ad, date_to_bs, format_bs_date


class Command(BaseCommand):
    help = 'Convert a date from AD to BS or from BS to AD'

    def add_arguments(self, parser):
        group = parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            '--ad',
            help='Gregorian date to convert (YYYY-MM-DD)'
        )
        group.add_argument(
            '--bs',
            help='Bikram Sambat date to convert (YYYY-MM-DD)'
        )

    def handle(self, *args, **options):
        try:
            if options['ad']:
                self.convert_ad(options['ad'])
            else:
                self.convert_bs(options['bs'])
        except CalendarError as e:
            raise CommandError(str(e))

    def convert_ad(self, value):
        try:
            ad_date = datetime.strptime(value, '%Y-%m-%d').date()
        except ValueError:
            raise CommandError(f'Invalid AD date "{value}". Use YYYY-MM-DD')

        bs_date = date_to_bs(ad_date)
        self.stdout.write(
            self.style.SUCCESS(
                f'{ad_date} AD = {bs_date} BS '
                f'({format_bs_date(bs_date.year, bs_date.month, bs_date.day)}, {bs_date.weekday})'
            )
        )

    def convert_bs(self, value):
        try:
            year, month, day = (int(part) for part in value.split('-'))
        except ValueError:
            raise CommandError(f'Invalid BS date "{value}". Use YYYY-MM-DD')

        ad_date = bs_to_ad(year, month, day)
        self.stdout.write(
            self.style.SUCCESS(f'{year}-{month:02d}-{day:02d} BS = {ad_date} AD ({ad_date.weekday})')
        )
