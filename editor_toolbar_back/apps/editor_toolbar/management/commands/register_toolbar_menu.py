from django.core.management.base import BaseCommand

from apps.common.models import SystemConfig
from apps.menus.models import Menu
from apps.editor_toolbar.conf import DEFAULT_TOOLBAR_SETTINGS, SETTINGS_KEY, save_toolbar_settings


# (plugin_id, title, route_name, path, parent plugin_id, weight)
TOOLBAR_MENUS = [
    ('system.admin_content', 'Content', 'system.admin_content', '/admin/content', None, -10),
    ('admin_toolbar_tools.add_content', 'Add content', 'node.add_page', '/node/add', 'system.admin_content', 0),
    ('admin_toolbar_tools.extra_links:node.add', 'Add content', 'node.add_page', '/node/add', 'system.admin_content', 1),
    ('wienimal_editor_toolbar.content_overview', 'Content overview', 'wienimal_editor_toolbar.content_overview', '/admin/content/overview', None, -20),
    ('wienimal_editor_toolbar.content_add', 'Add content', 'wienimal_editor_toolbar.content_add', '/admin/content/add', None, -15),
    ('system.admin_structure', 'Structure', 'system.admin_structure', '/admin/structure', None, -5),
    ('entity.taxonomy_vocabulary.collection', 'Taxonomy', 'entity.taxonomy_vocabulary.collection', '/admin/structure/taxonomy', 'system.admin_structure', 0),
    ('system.admin_config', 'Configuration', 'system.admin_config', '/admin/config', None, 0),
]


class Command(BaseCommand):
    help = 'Register editor toolbar menus and default settings'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset-settings',
            action='store_true',
            help='Overwrite stored toolbar settings with the defaults',
        )

    def handle(self, *args, **options):
        self.stdout.write("="*60)
        self.stdout.write("Editor Toolbar Menus Registration")
        self.stdout.write("="*60)

        # Step 1: Create Menus
        self.stdout.write("\n[Step 1] Creating Menus...")

        registered = {}
        for plugin_id, title, route_name, path, parent_id, weight in TOOLBAR_MENUS:
            menu, created = Menu.objects.update_or_create(
                plugin_id=plugin_id,
                defaults={
                    'title': title,
                    'route_name': route_name,
                    'path': path,
                    'parent': registered.get(parent_id),
                    'weight': weight,
                    'is_active': True,
                }
            )
            registered[plugin_id] = menu
            self.stdout.write(f"  {'Created' if created else 'Updated'}: {menu.plugin_id}")

        # Step 2: Default Settings
        self.stdout.write("\n[Step 2] Storing Toolbar Settings...")

        exists = SystemConfig.objects.filter(key=SETTINGS_KEY).exists()
        if exists and not options['reset_settings']:
            self.stdout.write(f"  Exists: {SETTINGS_KEY}")
        else:
            save_toolbar_settings(DEFAULT_TOOLBAR_SETTINGS)
            self.stdout.write(f"  {'Reset' if exists else 'Created'}: {SETTINGS_KEY}")

        self.stdout.write("\n" + "="*60)
        self.stdout.write(self.style.SUCCESS('Successfully registered editor toolbar menus!'))
        self.stdout.write("="*60)
