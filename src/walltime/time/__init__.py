"""Contains the time value types and the functions that convert and display them.

Instants (:class:`.AbsoluteTime`) and spans (:class:`.ElapsedTime`) share one representation,
defined in :mod:`.micros`, but are separate classes so that an instant cannot be mistaken for a
span. :class:`.DurationView` renders either as ``[<days>d ]<h>:<mm>:<ss>``.
"""
