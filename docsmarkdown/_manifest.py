"""Module manifest. Mirrors the module.yaml files under modules/."""

VERSION = '0.1.0'

MODULES = [
    {
        "name": "core",
        "description": "Core services (config, events)",
        "requires": [],
        "provides_services": [
                "config",
                "events"
        ],
        "config": {
                "log_level": {
                        "type": "string",
                        "default": "WARN",
                        "widget": "select",
                        "label": "Log Level",
                        "public": True,
                        "options": [
                                {
                                        "value": "DEBUG",
                                        "label": "Debug"
                                },
                                {
                                        "value": "INFO",
                                        "label": "Info"
                                },
                                {
                                        "value": "WARN",
                                        "label": "Warning"
                                },
                                {
                                        "value": "ERROR",
                                        "label": "Error"
                                }
                        ]
                }
        },
        "commands": []
},
    {
        "name": "markdown",
        "description": "Markdown authoring: tables, snippets, links, smart quotes",
        "requires": [
                "config",
                "events"
        ],
        "provides_services": [],
        "config": {
                "replace_smart_quotes": {
                        "type": "boolean",
                        "default": True,
                        "widget": "checkbox",
                        "label": "Replace smart quotes",
                        "public": True
                }
        },
        "commands": [
                "insert_table",
                "insert_snippet",
                "insert_external_link",
                "insert_internal_link",
                "insert_video",
                "insert_include",
                "format_italic"
        ]
},
]
