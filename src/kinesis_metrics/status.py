import enum


class PluginStatus(enum.IntEnum):
    """
    The Nagios-compatible exit codes (e.g., for Sensu) this check can report.
    """

    Ok = 0
    Unknown = 3
