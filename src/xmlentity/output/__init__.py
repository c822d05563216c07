"""
Output sinks for rendered xmlentity documents.
"""

from xmlentity.output.files import write_xml_file

__all__ = ["write_xml_file"]
