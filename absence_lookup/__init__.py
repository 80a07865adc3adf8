"""District Chronic-Absenteeism Lookup package.

Loads a small CSV of school-district chronic absenteeism rates, searches it
by district name, and presents a selected district's yearly rates as a line
chart and a table.

Package Structure
-----------------
- `pipeline/district_data/`:
    Asynchronous CSV fetch (local file or HTTP), pandas parsing, header
    normalization and the immutable ``DistrictRecord`` type.
- `pipeline/lookup/`:
    Pure name search and the year-series projection.
- `pipeline/report/`:
    Standalone HTML report export for one district.
- `presenter/`:
    matplotlib chart and Rich table renderers plus the replace-and-dispose
    ``Presenter``.
- `controller.py`: Session state and one handler per UI event.
- `cli.py` / `ui_textual.py`: Command-line and Textual surfaces.
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `settings.py`: Runtime settings from the environment and `.env`.
- `exceptions.py`: Project-specific exception classes.

Examples
--------
>>> import absence_lookup
>>> # See cli.py or run_lookup.py for entrypoints.

"""
