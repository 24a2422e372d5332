"""Core — pure logic with no IO: errors, endpoint options, validators."""
