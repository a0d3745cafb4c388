"""On-disk storage for scouting records.

Everything here works on plain paths and Record objects: no Qt, no listeners.
The store layers change notification and failure policy on top.
"""

