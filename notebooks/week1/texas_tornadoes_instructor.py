# Databricks notebook source
# MAGIC %md
# MAGIC # CSAI-382 Week 1 – Texas Tornadoes: Dates, Times, and Maps (Instructor Notebook)
# MAGIC
# MAGIC **What students will learn today:**
# MAGIC - Load a CSV file and **force a column to stay text** (leading zeros!).
# MAGIC - Rebuild a timestamp from a date column and an `HHMM` time column.
# MAGIC - Pull out month and hour, then **bin** hours into parts of the day.
# MAGIC - Recode a category (EF0–EF5) into numbers so we can plot it.
# MAGIC - Count, compare, and draw bar charts, boxplots, and a simple map.
# MAGIC
# MAGIC ---
# MAGIC
# MAGIC ### Instructor Note (Do not read word-for-word)
# MAGIC - Flow for the live session:
# MAGIC   1. Load the file the *wrong* way first and look at the `time` column.
# MAGIC   2. Load it the right way (`dtype=str`).
# MAGIC   3. Build `event_time`, then `month`, `hour`, `time_of_day`.
# MAGIC   4. Recode `f_scale` into `f_number`.
# MAGIC   5. Counts + charts, then the map.
# MAGIC   6. Ethics discussion + short spiritual thought.
# MAGIC - Speak slowly, pause often, and check for questions (ESL friendly).
# COMMAND ----------
# MAGIC %md
# MAGIC ## 1. Setup & Imports
# MAGIC
# MAGIC Change `data_dir` **before class** so the demo runs. If the real file is not there yet, the cell writes a small mock version.
# MAGIC
# MAGIC **Instructor Tip:** Run the logging cell twice to show that lines are not duplicated.
# COMMAND ----------
import pandas as pd
import matplotlib.pyplot as plt

from eda_lessons import configure_logging, load_config
from eda_lessons import plots, tornadoes
from eda_lessons.geography import texas_outline
from eda_lessons.loaders import load_csv, load_tornadoes
from eda_lessons.sample_data import write_sample_files

# Instructor: set these to match your workspace
config = load_config(data_dir="data", log_dir="logs")
configure_logging(config.log_dir)
plots.configure_style()

if not config.tornado_path.exists():
    print("Real tornado file not found, writing mock data to", config.data_dir)
    write_sample_files(config.data_dir, config)

print("Tornado file:", config.tornado_path)
# COMMAND ----------
# MAGIC %md
# MAGIC ## 2. The Leading-Zero Trap
# MAGIC
# MAGIC The `time` column looks like `"0745"`. If pandas **guesses** the type, it sees a number and stores `745`. The zero is gone, and `745` does not look like a time anymore.
# MAGIC
# MAGIC 🚨 **Common Mistake:** Students read the file with defaults and then try to slice `"745"[:2]` → `"74"` o'clock.
# MAGIC
# MAGIC 💡 Look for `"2400"` too: it reads fine as a number but is not a real clock time. We will meet it again in Section 4.
# COMMAND ----------
# BAD example: let pandas guess the type
guessed_df = load_csv(config.tornado_path)
print("Guessed dtype for time:", guessed_df["time"].dtype)
guessed_df[["date", "time"]].head()
# COMMAND ----------
# GOOD example: tell pandas that time is text
tornado_df = load_tornadoes(config.tornado_path)
print("Forced dtype for time:", tornado_df["time"].dtype)
tornado_df[["date", "time"]].head()
# COMMAND ----------
# MAGIC %md
# MAGIC If a classmate already saved the damaged column, we can repair it by padding back to four characters.
# COMMAND ----------
repaired = tornadoes.pad_time_text(guessed_df["time"])
pd.DataFrame({"guessed": guessed_df["time"], "repaired": repaired}).head()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 3. Inspecting the Data
# MAGIC
# MAGIC Why inspect? To verify columns, spot weird values (like `"EFU"` ratings or `0` end coordinates), and plan cleaning steps.
# COMMAND ----------
print("Shape:", tornado_df.shape)
tornado_df.info()
tornado_df.describe()
# COMMAND ----------
tornado_df["f_scale"].value_counts(dropna=False)
# COMMAND ----------
# MAGIC %md
# MAGIC ## 4. Rebuilding the Timestamp
# MAGIC
# MAGIC `"2011-05-24"` + `"1759"` → `"2011-05-24 17:59"`.
# MAGIC
# MAGIC - Characters `[0:2]` are the hour.
# MAGIC - Characters `[2:4]` are the minute.
# MAGIC
# MAGIC Rows that cannot be parsed become `NaT` (Not a Time). We count them instead of hiding them.
# COMMAND ----------
timed_df = tornadoes.parse_event_time(tornado_df)
timed_df[["date", "time", "event_time"]].head(10)
# COMMAND ----------
print("Rows without a usable timestamp:", timed_df["event_time"].isna().sum())
timed_df[timed_df["event_time"].isna()][["date", "time"]]
# COMMAND ----------
# MAGIC %md
# MAGIC ## 5. Month, Hour, and Time of Day
# MAGIC
# MAGIC We **bin** the hour into four parts of the day. Bins include the left edge: 6:00 is *Morning*, 5:59 is *Night*.
# MAGIC
# MAGIC | Bin | Hours |
# MAGIC | --- | --- |
# MAGIC | Night | 0–5 |
# MAGIC | Morning | 6–11 |
# MAGIC | Afternoon | 12–17 |
# MAGIC | Evening | 18–23 |
# MAGIC
# MAGIC **Instructor Tip:** Ask students where 18:00 goes before running the cell.
# COMMAND ----------
prepared_df = tornadoes.prepare_tornadoes(tornado_df)
prepared_df[["event_time", "month", "hour", "time_of_day", "f_scale", "f_number"]].head(10)
# COMMAND ----------
# MAGIC %md
# MAGIC ## 6. Counting Tornadoes
# MAGIC
# MAGIC Checkpoint questions for the class:
# MAGIC - How many tornadoes happened in **May**?
# MAGIC - What share of tornadoes happened **after the cutoff date**?
# COMMAND ----------
by_month = tornadoes.count_by(prepared_df, "month")
may_count = tornadoes.count_in_month(prepared_df, "May")
share = tornadoes.share_after(prepared_df, config.cutoff)

print("Tornadoes in May:", may_count)
print(f"Share after {config.cutoff.date()}: {share:.1%}")
by_month
# COMMAND ----------
fig, ax = plt.subplots(figsize=config.figure_size)
plots.bar_chart(by_month, "month", "count", title="Tornadoes by month", ylabel="Tornadoes", ax=ax)
plt.show()
# COMMAND ----------
by_time_of_day = tornadoes.count_by(prepared_df, "time_of_day")
fig, ax = plt.subplots(figsize=config.figure_size)
plots.bar_chart(by_time_of_day, "time_of_day", "count", title="Tornadoes by time of day", ylabel="Tornadoes", ax=ax)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC 💡 **Teaching Note:** Because `month` and `time_of_day` are *ordered categories*, the bars follow Jan→Dec and Night→Evening instead of alphabetical order. Show what happens with plain strings.
# COMMAND ----------
# MAGIC %md
# MAGIC ## 7. Who Reports Tornadoes?
# MAGIC
# MAGIC `source` is free text. We keep the most common values and fold the rest into `"Other"`.
# COMMAND ----------
sources = tornadoes.top_sources(prepared_df, n=8)
fig, ax = plt.subplots(figsize=config.figure_size)
plots.bar_chart(sources, "source", "count", title="Who reported the tornado?", horizontal=True, ax=ax)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 8. Strength by Time of Day (Boxplot)
# MAGIC
# MAGIC We can only draw a boxplot of **numbers**, so we use `f_number` (EF0 → 0 … EF5 → 5). Unknown ratings (`EFU`) become missing and are left out.
# MAGIC
# MAGIC 🚨 **Common Mistake:** Plotting `f_scale` directly gives a category axis, not a box.
# COMMAND ----------
fig, ax = plt.subplots(figsize=config.figure_size)
plots.box_plot(prepared_df, "time_of_day", "f_number", title="Rating by time of day", ylabel="EF rating", ax=ax)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 9. Where Did They Touch Down? (Map)
# MAGIC
# MAGIC - Grey shape: a rough outline of Texas.
# MAGIC - Dots: where each tornado began, colored by rating.
# MAGIC - Lines: begin → end path, only when the end point is recorded (`0,0` means "not recorded").
# MAGIC
# MAGIC **Instructor Tip:** Ask students why some dots have no line.
# COMMAND ----------
segments = tornadoes.track_segments(prepared_df)
print("Tornadoes with a recorded path:", len(segments), "of", len(prepared_df))

fig, ax = plt.subplots(figsize=(7, 7))
plots.geo_overlay(prepared_df, polygon=texas_outline(), segments=segments, title="Texas tornado touchdowns", ax=ax)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 10. Ethics Reflection
# MAGIC
# MAGIC - Reports depend on **who is there to see** the tornado. Rural tornadoes may be missing from the data.
# MAGIC - "More tornadoes in recent years" might mean **better reporting**, not more storms.
# MAGIC
# MAGIC Ask the class: *"What would you write under this chart so nobody misreads it?"*
# MAGIC
# MAGIC ## 11. Spiritual Thought
# MAGIC
# MAGIC A storm warning helps only if people trust it and act on it. Careful, honest data work builds that trust.
# MAGIC
# MAGIC ## 12. Summary
# MAGIC
# MAGIC Today we:
# MAGIC - Forced `time` to text and repaired a damaged column
# MAGIC - Rebuilt timestamps from date + `HHMM`
# MAGIC - Binned hours into parts of the day and recoded EF ratings
# MAGIC - Counted by month, time of day, and source
# MAGIC - Drew bar charts, a boxplot, and a map
