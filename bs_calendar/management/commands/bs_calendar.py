"""
Management command to print a BS month as a calendar grid
Usage: python manage.py bs_calendar 2081 1
"""
from django.core.management.base import BaseCommand, CommandError

from bs_calendar.exceptions import CalendarError
from bs_calendar.utils import bs_to_ad, month_grid


class Command(BaseCommand):
    help = 'Print the calendar grid of a Bikram Sambat month'

    def add_arguments(self, parser):
        parser.add_argument('year', type=int, help='BS year')
        parser.add_argument('month', type=int, help='BS month (1-12)')

    def handle(self, *args, **options):
        year = options['year']
        month = options['month']

        if not 1 <= month <= 12:
            raise CommandError('Month must be between 1 and 12')

        try:
            grid = month_grid(year, month)
        except CalendarError as e:
            raise CommandError(str(e))

        first_day = bs_to_ad(year, month, 1)
        last_day = bs_to_ad(year, month, grid.days_in_month)

        self.stdout.write(self.style.SUCCESS(f'{grid.month_name} {year}'.center(20)))
        self.stdout.write(f'{first_day} to {last_day} AD')
        self.stdout.write('Su Mo Tu We Th Fr Sa')

        cells = ['  '] * grid.start_weekday_index
        cells += [f'{day:2d}' for day in range(1, grid.days_in_month + 1)]
        for week_start in range(0, len(cells), 7):
            self.stdout.write(' '.join(cells[week_start:week_start + 7]))
