"""Setting keys and defaults owned by the blogroll renderer."""

# Plugin settings (constance keys) and their install-time defaults
ENABLE_LINKS_MANAGER = "BLOGROLL_ENABLE_LINKS_MANAGER"
CUSTOM_CLASS = "BLOGROLL_CUSTOM_CLASS"

DEFAULTS: dict[str, object] = {
    ENABLE_LINKS_MANAGER: False,
    CUSTOM_CLASS: "",
}

# Platform-owned enable record for the Links Manager feature
LINK_MANAGER_RECORD = "LINK_MANAGER_ENABLED"

SHORTCODE_NAME = "blogroll-links"

# Permission required to change plugin settings and to trigger menu hiding
MANAGE_SETTINGS_CAPABILITY = "constance.change_config"
