import pandas as pd
import numpy as np
import os
from ..workload.synthetic_generator import WORKLOAD_NAMES

NUMERIC_COLUMNS = ['hit_rate', 'confidence', 'memory_mb', 'seconds']


class ExcelLogger:
    _file_cleared_this_run = False  # Class variable to ensure file is only cleared once per run

    def __init__(self, filename="cache_metrics.xlsx"):
        self.filename = filename
        self.records = {}

    def log(self, step, block_id, outcome, hit_rate, hits, misses, confidence, mode,
            memory_mb, timestamp, cache_name, workload_name,
            evictions=0, ml_evictions=0, lru_fallbacks=0, victim=None, method=None):
        if cache_name not in self.records:
            self.records[cache_name] = []
        self.records[cache_name].append({
            "workload_name": workload_name,
            "step": step,
            "block_id": block_id,
            "outcome": outcome,
            "victim": victim,
            "method": method,
            "hit_rate": hit_rate,
            "hits": hits,
            "misses": misses,
            "confidence": confidence,
            "mode": mode,
            "memory_mb": memory_mb,
            "seconds": timestamp,
            "evictions": evictions,
            "ml_evictions": ml_evictions,
            "lru_fallbacks": lru_fallbacks
        })

    def _prepare(self, df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        # Built-in workloads first, any others in order of first appearance
        extra = [w for w in pd.unique(df['workload_name']) if w not in WORKLOAD_NAMES]
        df['workload_name'] = pd.Categorical(df['workload_name'], categories=WORKLOAD_NAMES + extra, ordered=True)
        df = df.sort_values(['workload_name', 'step'], kind='stable')
        for col in NUMERIC_COLUMNS:
            df[col] = df[col].astype(np.float64)
        return df

    def export(self):
        """Write logged records to an Excel file, one sheet per cache.

        The file is cleared on the first export of a run; later exports merge
        into existing sheets, dropping duplicate (workload_name, step) rows.
        """
        if not ExcelLogger._file_cleared_this_run:
            if os.path.exists(self.filename):
                os.remove(self.filename)
            ExcelLogger._file_cleared_this_run = True
        if os.path.exists(self.filename):
            with pd.ExcelWriter(self.filename, engine='openpyxl', mode='a', if_sheet_exists='replace') as writer:
                for cache_name, records in self.records.items():
                    df_new = pd.DataFrame(records)
                    try:
                        df_existing = pd.read_excel(self.filename, sheet_name=cache_name)
                        df_combined = pd.concat([df_existing, df_new], ignore_index=True)
                    except ValueError:
                        df_combined = df_new
                    df_combined = df_combined.drop_duplicates(subset=['workload_name', 'step'], keep='first')
                    df_combined = self._prepare(df_combined)
                    df_combined.to_excel(writer, sheet_name=cache_name, index=False, float_format='%.15f')
        else:
            with pd.ExcelWriter(self.filename, engine='openpyxl') as writer:
                for cache_name, records in self.records.items():
                    df = self._prepare(pd.DataFrame(records))
                    df.to_excel(writer, sheet_name=cache_name, index=False, float_format='%.15f')
