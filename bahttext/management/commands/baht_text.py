"""
Management command: baht_text

Prints the Thai reading of one or more amounts, one per line.

Usage:
    python manage.py baht_text 1500.50
    python manage.py baht_text 100.995 --allow-overflow
    python manage.py baht_text 123.456 99.999 --rounding toward_zero
"""

from django.core.management.base import BaseCommand, CommandError

from bahttext.converter import BahtTextConverter
from bahttext.exceptions import BahtTextError
from bahttext.rounding import RoundingMode


class Command(BaseCommand):
    help = "Print amounts as Thai baht text"

    def add_arguments(self, parser):
        parser.add_argument("amounts", nargs="+", help="Amounts such as 1500.50 or 1,234,567")
        parser.add_argument(
            "--rounding",
            choices=RoundingMode.values,
            help="Satang rounding mode (default: BAHTTEXT_ROUNDING_MODE)",
        )
        overflow = parser.add_mutually_exclusive_group()
        overflow.add_argument(
            "--allow-overflow",
            dest="allow_overflow",
            action="store_true",
            default=None,
            help="Let satang that round to 100 carry into baht",
        )
        overflow.add_argument(
            "--no-overflow",
            dest="allow_overflow",
            action="store_false",
            default=None,
            help="Clamp satang at 99 instead of carrying into baht",
        )

    def handle(self, *args, **options):
        converter = self._build_converter(options)

        for amount in options["amounts"]:
            try:
                result = converter.convert(amount)
            except BahtTextError as exc:
                raise CommandError(f"{amount}: {exc} ({exc.hint})") from exc

            self.stdout.write(result.text)
            if result.clamped:
                self.stderr.write(
                    self.style.WARNING(f"{amount}: satang clamped to 99 (use --allow-overflow)")
                )

    # -------------------------------------------------------------------------

    def _build_converter(self, options):
        # Warnings are reported on stderr by the command itself
        changes = {"warn_on_clamp": False}
        if options["rounding"]:
            changes["rounding_mode"] = options["rounding"]
        if options["allow_overflow"] is not None:
            changes["allow_overflow"] = options["allow_overflow"]
        return BahtTextConverter.from_settings().with_options(**changes)
