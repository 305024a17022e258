from data_designer.plugins.plugin import Plugin, PluginType

readability_plugin = Plugin(
    config_qualified_name="data_designer_readability.config.ReadabilityColumnConfig",
    impl_qualified_name="data_designer_readability.generator.ReadabilityColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
