from django.core.management.base import BaseCommand, CommandError

from apps.routing.components import get_components


class Command(BaseCommand):
    help = "Clear cached translated slugs and rebuild the localized route rules"

    def add_arguments(self, parser):
        parser.add_argument(
            "--show",
            action="store_true",
            help="List the active rules after rebuilding",
        )

    def handle(self, *args, **options):
        components = get_components()
        if components is None:
            raise CommandError(
                "Localized routing is not active (check ROUTING_ENABLED and apps.i18n)"
            )

        rules = components.rebuild_now()

        if options["show"]:
            for rule in rules:
                query = rule.query
                self.stdout.write(
                    f"  {rule.pattern} -> {query.resource_type} "
                    f"'{query.slug}' ({query.language})"
                )

        self.stdout.write(self.style.SUCCESS(f"Rebuilt {len(rules)} route rules"))
